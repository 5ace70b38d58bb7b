import os

import pytest

from dent.errors import EmptySampleError
from dent.plotting import plot_summaries
from dent.stats.summary import Summary


def test_plot_summaries_writes_image(tmp_path):
    summaries = [Summary.from_sample([1, 2, 3, 9]), Summary.from_sample([4, 5, 6])]
    out = plot_summaries(summaries, str(tmp_path / "ranges.png"), ["a", "b"])
    assert out.endswith("ranges.png")
    assert os.path.exists(out)


def test_plot_summaries_default_labels(tmp_path):
    out = plot_summaries([Summary.from_sample([7])], str(tmp_path / "one.svg"))
    assert os.path.exists(out)


def test_plot_summaries_validates_inputs(tmp_path):
    with pytest.raises(EmptySampleError):
        plot_summaries([], str(tmp_path / "x.png"))
    with pytest.raises(ValueError):
        plot_summaries([Summary.from_sample([1, 2])], str(tmp_path / "x.png"), ["a", "b"])
