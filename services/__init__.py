"""
Services package for VoyaGo
Contains clients for external services such as Google Cloud Translation
"""

from .translation_service import GoogleTranslationService, TranslationService

__all__ = ["GoogleTranslationService", "TranslationService"]
