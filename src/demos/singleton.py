"""Singleton: ensure a class has only one instance."""

from src.core.patterns import ThreadSafeSingleton


# =============================================================================
# Before: every caller builds its own settings object
# =============================================================================

class Settings:
    def __init__(self, mode: str = ""):
        self.mode = mode


def before() -> None:
    s1 = Settings(mode="A")
    s2 = Settings(mode="B")
    # Two "global" settings objects now disagree
    print(f"SingletonBefore: s1.Mode={s1.mode}, s2.Mode={s2.mode}")


# =============================================================================
# After: one shared instance behind a global access point
# =============================================================================

class SettingsSingleton(ThreadSafeSingleton):
    """Application settings shared by every caller."""

    def _initialize(self) -> None:
        self.mode = "Default"


def after() -> None:
    SettingsSingleton.get_instance().mode = "X"

    s2 = SettingsSingleton.get_instance()
    print(f"SingletonAfter: Instance.Mode={s2.mode}")
