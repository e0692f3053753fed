"""Unit tests for WheelSession."""

import pytest

from repositories import MemoryRepository
from lifewheel import PLACEHOLDER_SUMMARY, WheelSession


@pytest.fixture
def session(memory_repo):
    return WheelSession(repository=memory_repo)


class TestCategories:
    """Test area management through the session."""

    def test_starts_with_defaults_at_five(self, session):
        assert len(session.categories) == 8
        assert set(session.scores.scores.values()) == {5}

    def test_add_seeds_score(self, session):
        category = session.add_category("Creativity")
        assert category is not None
        assert session.scores.get("Creativity") == 5

    def test_add_duplicate_leaves_scores_alone(self, session):
        session.set_score("Finances", 2)
        assert session.add_category("finances") is None
        assert session.scores.get("Finances") == 2

    def test_remove_drops_score(self, session):
        session.remove_category("fun")
        assert session.scores.get("Fun & Recreation") is None
        assert "Fun & Recreation" not in session.chart_dataset().labels

    def test_removed_area_leaves_insights(self, session):
        session.set_score("Fun & Recreation", 0)
        session.remove_category("fun")
        assert all("Fun & Recreation" not in h for h in session.insights().highlights)

    def test_can_remove_category(self, session):
        for category_id in ["growth", "fun", "environment", "spirituality"]:
            assert session.can_remove_category()
            session.remove_category(category_id)
        assert not session.can_remove_category()


class TestScores:
    """Test scoring through the session."""

    def test_set_score_clamps(self, session):
        assert session.set_score("Finances", 12)
        assert session.scores.get("Finances") == 10

    def test_set_score_unknown_label(self, session):
        assert not session.set_score("Nope", 3)

    def test_insights_follow_scores(self, session):
        session.set_score("Finances", 1)
        insights = session.insights()
        assert insights.summary != PLACEHOLDER_SUMMARY
        assert insights.highlights[0].startswith("Finances: 1/10")


class TestSnapshots:
    """Test snapshot flow through the session."""

    def test_save_selects_new_snapshot(self, session):
        snapshot = session.save_snapshot("Baseline")
        assert session.snapshots.active_comparison_id == snapshot.id
        assert session.chart_dataset().comparison.name == "Baseline"

    def test_save_replaces_previous_selection(self, session):
        first = session.save_snapshot("first")
        second = session.save_snapshot("second")
        assert session.snapshots.active_comparison_id == second.id
        assert [s.id for s in session.list_snapshots()] == [second.id, first.id]

    def test_comparison_frozen_against_later_edits(self, session):
        session.set_score("Finances", 4)
        session.save_snapshot()
        session.set_score("Finances", 9)

        dataset = session.chart_dataset()
        index = dataset.labels.index("Finances")
        assert dataset.current.values[index] == 9
        assert dataset.comparison.values[index] == 4

    def test_toggle_and_clear(self, session):
        snapshot = session.save_snapshot()
        assert session.select_for_comparison(snapshot.id) is None
        assert session.select_for_comparison(snapshot.id) == snapshot.id
        session.clear_comparison()
        assert session.chart_dataset().comparison is None

    def test_history_survives_new_session(self, memory_repo):
        WheelSession(repository=memory_repo).save_snapshot("kept")
        reopened = WheelSession(repository=memory_repo)
        assert [s.name for s in reopened.list_snapshots()] == ["kept"]
        assert reopened.snapshots.active_comparison_id is None


class TestState:
    """Test the serialized view."""

    def test_state_shape(self, session):
        session.set_score("Finances", 2)
        session.set_score("Career & Work", 9)
        state = session.state()

        assert set(state) == {
            "categories", "can_remove", "insights", "chart", "snapshots", "active_comparison_id",
        }
        by_label = {c["label"]: c for c in state["categories"]}
        assert by_label["Finances"]["badge"] == "priority"
        assert by_label["Career & Work"]["badge"] == "strength"
        assert by_label["Relationships"]["badge"] is None
        assert state["can_remove"] is True
        assert state["snapshots"] == []

    def test_state_with_snapshot(self):
        session = WheelSession(repository=MemoryRepository())
        snapshot = session.save_snapshot("Baseline")
        state = session.state()
        assert state["active_comparison_id"] == snapshot.id
        assert state["snapshots"][0]["name"] == "Baseline"
        assert len(state["chart"]["series"]) == 2
