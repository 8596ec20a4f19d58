import logging

from lingebra.__main__ import main


def test_demo_reports_dot_product(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="lingebra"):
        main()
    assert "u . v = 4.0" in caplog.text
