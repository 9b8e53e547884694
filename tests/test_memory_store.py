from unittest.mock import MagicMock

import pytest

import store.memory_store as memory_store
from store.memory_store import MemoryStore


@pytest.fixture
def fake_sleep(monkeypatch):
    sleep = MagicMock()
    monkeypatch.setattr(memory_store.time, "sleep", sleep)
    return sleep


def test_delay_sleeps_when_simulating(fake_sleep):
    MemoryStore(simulate_latency=True).delay(100)
    fake_sleep.assert_called_once_with(0.1)


def test_delay_is_noop_when_disabled(fake_sleep):
    MemoryStore(simulate_latency=False).delay(100)
    fake_sleep.assert_not_called()


def test_service_read_waits_once(fake_sleep, slow_services):
    slow_services.categories.get_all()
    fake_sleep.assert_called_once_with(0.05)


def test_new_id_is_unique_and_prefixed():
    ids = {MemoryStore.new_id("exp") for _ in range(200)}
    assert len(ids) == 200
    assert all(i.startswith("exp-") for i in ids)


def test_seed_defaults(store):
    store.seed_defaults()
    assert len(store.categories) == 10
    assert len(store.expenses) == 18
    assert len(store.budget_goals) == 7
    assert store.budget_goals[0].start_date == "2024-06-01"
    assert store.budget_goals[0].end_date == "2024-06-30"


@pytest.mark.parametrize("seed, expected_categories", [(True, 10), (False, 0)])
def test_open_default_honours_config(monkeypatch, seed, expected_categories):
    settings = {"simulate_latency": False, "seed_demo_data": seed}
    monkeypatch.setattr(memory_store, "get_setting", lambda key, default=None: settings[key])

    s = MemoryStore.open_default()

    assert s.simulate_latency is False
    assert len(s.categories) == expected_categories
