from .settings import DEFAULT_SUBMIT_METHODS, NO_SUBMIT_METHODS, UiSettings, UiSettingsBuilder

__all__ = ['DEFAULT_SUBMIT_METHODS', 'NO_SUBMIT_METHODS', 'UiSettings', 'UiSettingsBuilder']
