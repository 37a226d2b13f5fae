"""Tests for the composition root (wellness_quest/app.py)"""
from wellness_quest.app import create_service


def test_create_service_persists_to_json_file(tmp_path):
    service = create_service(data_path=tmp_path, storage_key="wq", today="2024-03-15")

    service.complete_quest("water", "2024-03-15")

    assert (tmp_path / "wq.json").exists()


def test_create_service_reloads_previous_session(tmp_path):
    first = create_service(data_path=tmp_path, storage_key="wq", today="2024-03-15")
    first.complete_quest("sleep", "2024-03-15")
    first.set_display_name("Kai")

    second = create_service(data_path=tmp_path, storage_key="wq", today="2024-03-16")

    assert second.state.xp == 20
    assert second.state.display_name == "Kai"
    assert second.dashboard("2024-03-16")["leaderboard"][-1].name == "Kai"
