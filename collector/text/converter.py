"""Simplified to traditional (Taiwan) Chinese conversion backed by OpenCC."""

import logging

from opencc import OpenCC

from collector.models.common import JsonValue

logger = logging.getLogger(__name__)

DEFAULT_CONVERSION = "s2tw"


class ChineseConverter:
    """Wraps an OpenCC converter that may fail to initialize.

    When unavailable every method returns its input unchanged, so callers
    never need to branch on availability.
    """

    def __init__(self, conversion: str = DEFAULT_CONVERSION, enabled: bool = True):
        self._cc: OpenCC | None = None
        if not enabled:
            logger.info("Chinese conversion disabled by config")
            return
        try:
            self._cc = OpenCC(conversion)
        except Exception as e:
            logger.warning("OpenCC init failed for %s, passing text through: %s", conversion, e)
            self._cc = None

    @property
    def available(self) -> bool:
        return self._cc is not None

    def convert(self, text: str) -> str:
        if self._cc is None:
            return text
        try:
            return self._cc.convert(text)
        except Exception as e:
            logger.debug("Conversion failed, keeping original text: %s", e)
            return text

    def convert_value(self, value: JsonValue) -> JsonValue:
        """Convert every string in a JSON value, mapping keys included."""
        if self._cc is None:
            return value
        if isinstance(value, str):
            return self.convert(value)
        if isinstance(value, list):
            return [self.convert_value(item) for item in value]
        if isinstance(value, dict):
            return {self.convert(k): self.convert_value(v) for k, v in value.items()}
        return value
