from textchunk.core.config import Settings


def get_test_settings(**overrides) -> Settings:
    """Returns a Settings instance for testing.

    Ignores any ``.env`` file so results only depend on the environment the
    test sets up explicitly.
    """
    return Settings(_env_file=None, **overrides)


class RecordingObserver:
    """Oversize observer that remembers every (total, chunk_size) it sees."""

    def __init__(self):
        self.calls: list[tuple[int, int]] = []

    def __call__(self, total: int, chunk_size: int) -> None:
        self.calls.append((total, chunk_size))
