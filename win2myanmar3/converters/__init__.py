from .text_converter import TextConverter
from .office_converter import OfficeConverter

__all__ = ["TextConverter", "OfficeConverter"]
