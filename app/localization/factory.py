"""Factory functions for creating localization components.

Build a registry or service from `LocalizationSettings` so application
startup does not repeat the wiring.
"""

from typing import Optional

from localization.config import LocalizationSettings, settings as default_settings
from localization.logging import configure_logging, get_module_logger
from localization.registry import LocaleRegistry
from localization.service import LocalizationService

logger = get_module_logger(__name__)


def create_registry(
    settings: Optional[LocalizationSettings] = None,
    preload: bool = True,
) -> LocaleRegistry:
    """Create and configure a LocaleRegistry.

    Args:
        settings: Settings to use (default: module-level settings).
        preload: Whether to load `translations_pattern` files immediately.

    Returns:
        LocaleRegistry: Registry with configured languages registered.

    Raises:
        LanguageAlreadyRegisteredError: If configured languages repeat.
        TranslationLoadError: If a translation file fails to load.

    Usage:
        # From environment
        registry = create_registry()

        # Explicit settings
        registry = create_registry(
            LocalizationSettings(languages=["en", "lv"], translations_pattern="locales/*.yml")
        )
    """
    settings = settings or default_settings

    registry = LocaleRegistry(*settings.languages, strict_usage=settings.strict_usage)

    if preload and settings.translations_pattern:
        paths = registry.load_yaml_glob(
            settings.default_language, settings.translations_pattern
        )
        logger.info(
            "registry_created_with_preload",
            pattern=settings.translations_pattern,
            file_count=len(paths),
            languages=registry.enabled_languages(),
        )
    else:
        logger.info(
            "registry_created_lazy",
            languages=registry.enabled_languages(),
        )

    return registry


def create_service(
    settings: Optional[LocalizationSettings] = None,
    preload: bool = True,
    setup_logging: bool = False,
) -> LocalizationService:
    """Create a LocalizationService over a freshly built registry.

    Pass `setup_logging=True` from standalone programs to install the
    package logging defaults; embedding applications keep their own.
    """
    settings = settings or default_settings
    if setup_logging:
        configure_logging(settings.LOG_LEVEL, settings.is_production)
    registry = create_registry(settings, preload=preload)
    return LocalizationService(registry, default_language=settings.default_language)
