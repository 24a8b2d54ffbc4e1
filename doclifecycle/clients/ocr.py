"""OCR engine collaborator."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

import pytesseract

from ..config.app import AppConfig
from ..middleware.error_classifier import InfrastructureClient


class OcrEngine(InfrastructureClient, ABC):
    """Interface for optical character recognition."""

    @abstractmethod
    def extract_text(self, image_path: Union[str, Path]) -> str:
        """Recognize the text of a page image."""


class TesseractOcrEngine(OcrEngine):
    """OCR engine backed by the Tesseract binary."""

    def __init__(self, config: AppConfig) -> None:
        self.config = config
        self.lang = config.ocr_language

    def extract_text(self, image_path: Union[str, Path]) -> str:
        """Run Tesseract on a page image.

        Args:
            image_path: Path to the image file

        Returns:
            Recognized text, stripped of surrounding whitespace
        """
        return pytesseract.image_to_string(str(image_path), lang=self.lang).strip()
