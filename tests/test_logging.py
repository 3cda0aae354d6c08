from loguru import logger

from owner_resolution.logging import bind_context, configure_logger


def test_bind_context_drops_none(log_records):
    bind_context(context="current", segment=None).info("resolved")

    assert log_records[-1]["extra"] == {"context": "current"}


def test_configure_logger_writes_file(tmp_path, monkeypatch):
    monkeypatch.delenv("LOG_JSON", raising=False)
    log_file = tmp_path / "logs" / "owner_resolution.log"

    configure_logger(level="DEBUG", log_file=log_file)
    logger.bind(context="2019-03-07").debug("owner_groups_built current=1")
    logger.remove()

    text = log_file.read_text(encoding="utf-8")
    assert "owner_groups_built current=1" in text
    assert "2019-03-07" in text
