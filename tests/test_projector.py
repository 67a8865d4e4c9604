"""
Tests for statistics and view-model projections.
"""

from watchlist_manager.models import Entry
from watchlist_manager.projector import EMPTY_TITLE, counts, present, status_label


def entries_with(*statuses):
    return [
        Entry(id=i, title=f"Title {i}", status=status, genre="drama", date_added="2024-01-01T00:00:00Z")
        for i, status in enumerate(statuses, start=1)
    ]


class TestCounts:
    def test_empty_collection(self):
        assert counts([]).to_dict() == {"total": 0, "watching": 0, "completed": 0, "on-hold": 0}

    def test_counts_by_status(self):
        result = counts(entries_with("watching", "watching", "completed", "on-hold"))
        assert result.total == 4
        assert result.per_status == {"watching": 2, "completed": 1, "on-hold": 1}

    def test_untracked_statuses_count_only_in_total(self):
        entries = entries_with("watching", "dropped", "plan-to-watch")
        result = counts(entries)

        assert result.total == len(entries)
        assert sum(result.per_status.values()) == 1
        assert sum(result.per_status.values()) <= result.total

    def test_custom_status_set(self):
        result = counts(entries_with("dropped", "watching"), statuses=["dropped"])
        assert result.to_dict() == {"total": 2, "dropped": 1}


class TestPresent:
    def test_cards_follow_collection_order(self):
        entries = entries_with("watching", "on-hold", "completed")
        view = present(entries)

        assert [card.index for card in view.cards] == [0, 1, 2]
        assert [card.entry for card in view.cards] == entries
        assert not view.is_empty

    def test_card_dict_includes_display_fields(self):
        view = present(entries_with("on-hold"))
        card = view.to_dict()["entries"][0]

        assert card["statusLabel"] == "on hold"
        assert card["hasImage"] is False
        assert card["index"] == 0
        assert card["dateAdded"] == "2024-01-01T00:00:00Z"

    def test_empty_state(self):
        data = present([]).to_dict()
        assert data["isEmpty"] is True
        assert data["emptyState"]["title"] == EMPTY_TITLE

    def test_form_state_for_create(self):
        form = present(entries_with("watching")).to_dict()["form"]
        assert form == {
            "mode": "create",
            "editingIndex": None,
            "heading": "Add New Movie",
            "submitLabel": "Add Movie",
            "showCancel": False,
        }

    def test_form_state_while_editing(self):
        view = present(entries_with("watching", "completed"), editing_index=1)

        assert view.form.heading == "Edit Movie"
        assert view.form.submit_label == "Update Movie"
        assert [card.is_editing for card in view.cards] == [False, True]

    def test_present_does_not_mutate(self):
        entries = entries_with("watching")
        before = list(entries)
        present(entries, editing_index=0)
        assert entries == before


def test_status_label():
    assert status_label("plan-to-watch") == "plan to watch"
    assert status_label("watching") == "watching"
