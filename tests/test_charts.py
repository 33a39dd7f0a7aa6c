"""Tests for the biorhythm chart."""

from datetime import date

from spirithub.biorhythm import biorhythm_series
from spirithub.services.charts import biorhythm_figure


class TestBiorhythmFigure:
    def test_one_trace_per_cycle(self):
        fig = biorhythm_figure(biorhythm_series(date(1990, 5, 17), date(2025, 11, 11), 14))
        assert [t.name for t in fig.data] == ["Fizic", "Emoțional", "Intelectual"]
        assert len(fig.data[0].x) == 14

    def test_highlight_adds_marker(self):
        series = biorhythm_series(date(1990, 5, 17), date(2025, 11, 11), 14)
        plain = biorhythm_figure(series)
        marked = biorhythm_figure(series, highlight=date(2025, 11, 14))
        assert len(marked.layout.shapes) == len(plain.layout.shapes) + 1

    def test_height(self):
        fig = biorhythm_figure(biorhythm_series(date(1990, 5, 17), date(2025, 11, 11), 3), height=300)
        assert fig.layout.height == 300
