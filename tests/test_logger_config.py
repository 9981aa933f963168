import io
import logging

from colorama import Fore, Style

from loadingbar.logger.logger_config import SUCCESS_LEVEL, ColorizingStreamHandler, logger


def make_logger(stream: io.StringIO) -> logging.Logger:
    test_logger = logging.getLogger("LOADINGBAR-TEST")
    test_logger.handlers.clear()
    test_logger.propagate = False
    test_logger.setLevel(logging.DEBUG)
    handler = ColorizingStreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s:%(message)s"))
    test_logger.addHandler(handler)
    return test_logger


def test_success_level_is_registered() -> None:
    assert logging.getLevelName(SUCCESS_LEVEL) == "SUCCESS"
    assert hasattr(logger, "success")


def test_success_is_green() -> None:
    stream = io.StringIO()
    make_logger(stream).success("Done!")
    assert stream.getvalue() == f"{Fore.GREEN}SUCCESS:Done!{Style.RESET_ALL}\n"


def test_error_is_red_and_info_is_plain() -> None:
    stream = io.StringIO()
    test_logger = make_logger(stream)
    test_logger.error("boom")
    test_logger.info("hello")
    lines = stream.getvalue().splitlines()
    assert lines == [f"{Fore.RED}ERROR:boom{Style.RESET_ALL}", "INFO:hello"]


def test_render_logs_do_not_reach_stdout(capsys, sleeps) -> None:
    from loadingbar import create_with_config

    logger.setLevel(logging.DEBUG)
    try:
        create_with_config(1, "#", 2, "").render()
    finally:
        logger.setLevel(logging.INFO)

    captured = capsys.readouterr()
    assert captured.out == "[# ]\r[##]\n"
    assert "Rendering 2 frames" in captured.err
