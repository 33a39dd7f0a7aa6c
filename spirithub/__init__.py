# spirithub/__init__.py
"""
SpiritHub.ro: calculatoare de numerologie, bioritm, fazele lunii,
dicționar de vise și conținut zilnic.
"""

__version__ = "0.1.0"
