"""Infrastructure modules for the application.

Centralized infrastructure components:
- configuration: Settings management (Settings, I18nSettings)
- logging: Structured logging (configure_logging, get_module_logger)
- i18n: gettext catalogs, locale resolution and request helpers
- services: Dependency injection services (LocaleDep, get_settings)
"""
