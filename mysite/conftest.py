import pytest
from django.core.cache import cache


@pytest.fixture(autouse=True)
def clear_results_cache():
    """Vide le cache avant et après chaque test.
    - Le cache mémoire locale survit d'un test à l'autre sinon.
    """
    cache.clear()
    yield
    cache.clear()
