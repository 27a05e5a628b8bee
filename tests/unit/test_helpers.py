"""
Test helper utilities
"""
import logging
import pytest
from datetime import timezone
from document_store.utils.helpers import generate_document_id, is_blank, utc_now
from document_store.core.config import LoggingConfig
from document_store.utils.logger import setup_logging, setup_logging_from_config, get_logger


class TestGenerateDocumentId:
    """Test identifier generation"""

    def test_default_length(self):
        """Generated ids have ten characters"""
        document_id = generate_document_id()

        assert len(document_id) == 10
        assert document_id.strip() == document_id

    def test_uuid_text_prefix(self):
        """Ids are taken from the canonical UUID text form"""
        document_id = generate_document_id()

        assert document_id[8] == "-"
        assert all(c in "0123456789abcdef" for c in document_id[:8])

    def test_custom_length(self):
        """Test non-default lengths"""
        assert len(generate_document_id(4)) == 4
        assert len(generate_document_id(36)) == 36

    def test_invalid_length(self):
        """Test lengths outside the UUID text"""
        with pytest.raises(ValueError):
            generate_document_id(0)
        with pytest.raises(ValueError):
            generate_document_id(37)

    def test_ids_are_unique(self):
        """Repeated calls do not collide in practice"""
        ids = {generate_document_id() for _ in range(1000)}

        assert len(ids) == 1000


class TestHelpers:
    """Test string and time helpers"""

    def test_is_blank(self):
        assert is_blank(None)
        assert is_blank("")
        assert is_blank("   ")
        assert is_blank("\t\n")
        assert not is_blank("a")
        assert not is_blank(" a ")

    def test_utc_now_is_aware(self):
        assert utc_now().tzinfo == timezone.utc


class TestLogger:
    """Test logging setup"""

    def test_setup_logging_with_file(self, tmp_path):
        """Test file handler creation"""
        log_file = tmp_path / "logs" / "store.log"
        root_logger = logging.getLogger()
        handlers_before = list(root_logger.handlers)
        level_before = root_logger.level

        try:
            setup_logging("DEBUG", str(log_file))
            get_logger("DocumentStore").info("hello")

            assert root_logger.level == logging.DEBUG
            assert log_file.exists()
            assert "hello" in log_file.read_text()
        finally:
            for handler in root_logger.handlers[:]:
                if handler not in handlers_before:
                    root_logger.removeHandler(handler)
                    handler.close()
            root_logger.setLevel(level_before)

    def test_setup_logging_from_config(self):
        """Test logging setup from a LoggingConfig"""
        root_logger = logging.getLogger()
        handlers_before = list(root_logger.handlers)
        level_before = root_logger.level

        try:
            setup_logging_from_config(LoggingConfig(level="warning"))

            assert root_logger.level == logging.WARNING
            assert len(root_logger.handlers) == len(handlers_before) + 1
        finally:
            for handler in root_logger.handlers[:]:
                if handler not in handlers_before:
                    root_logger.removeHandler(handler)
            root_logger.setLevel(level_before)

    def test_get_logger(self):
        assert get_logger("DocumentStore").name == "DocumentStore"


if __name__ == '__main__':
    pytest.main([__file__])
