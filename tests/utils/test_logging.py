import logging
import math

import pytest

from utils.logging import SUMMARY_FIELDS, format_summary, get_logger, log_summary, summary_csv_writer


def test_get_logger_is_idempotent():
    lg1 = get_logger("gaussutil.test.idem")
    lg2 = get_logger("gaussutil.test.idem")
    assert lg1 is lg2
    tagged = [h for h in lg1.handlers if getattr(h, "_gaussutil_handler", False)]
    assert len(tagged) == 1
    assert lg1.propagate is False


def _capture(name: str):
    records = []

    class _H(logging.Handler):
        def emit(self, record):
            records.append(record.getMessage())

    lg = logging.getLogger(name)
    lg.setLevel(logging.INFO)
    lg.propagate = False
    lg.addHandler(_H())
    return lg, records


def test_format_summary_field_order():
    assert format_summary(0.3, 0.1, 10, 0.2875) == "mean=0.3 sd=0.1 n=10 sample_mean=0.2875"
    assert SUMMARY_FIELDS == ("mean", "sd", "n", "sample_mean")


def test_log_summary_line():
    lg, records = _capture("gaussutil.test.summary")
    log_summary(0.5, 0.0, 3, 0.5, logger=lg)
    assert records == ["touch mean=0.5 sd=0 n=3 sample_mean=0.5"]


@pytest.mark.parametrize(
    "args",
    [
        (math.nan, 0.1, 10, 0.3),
        (0.3, math.inf, 10, 0.3),
        (0.3, 0.1, -1, 0.3),
        (0.3, 0.1, 2.0, 0.3),
        (0.3, 0.1, True, 0.3),
        (0.3, 0.1, 10, "abc"),
    ],
)
def test_summary_rejects_bad_fields(args):
    with pytest.raises(ValueError):
        format_summary(*args)


def test_summary_csv_writes_header_once(tmp_path):
    path = tmp_path / "summary.csv"
    write = summary_csv_writer(str(path))
    write(0.3, 0.1, 10, 0.25)
    write(0.5, 0.2, 4, 0.5)
    assert path.read_text(encoding="utf-8").splitlines() == [
        "mean,sd,n,sample_mean",
        "0.3,0.1,10,0.25",
        "0.5,0.2,4,0.5",
    ]


def test_summary_csv_refuses_foreign_header(tmp_path):
    path = tmp_path / "other.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    write = summary_csv_writer(str(path))
    with pytest.raises(ValueError, match="header"):
        write(0.3, 0.1, 10, 0.25)
    assert path.read_text(encoding="utf-8") == "a,b\n1,2\n"


def test_summary_csv_rejects_empty_path():
    with pytest.raises(ValueError):
        summary_csv_writer("")
