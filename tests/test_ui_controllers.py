from datetime import datetime, timezone

import pytest

from pokedex.errors import FormValidationError
from pokedex.models import Pokeymon, PokeymonType
from pokedex.persistence import LoadStatus, PokeymonStore
from pokedex.ui import EMPTY_NAME_MESSAGE, ListController, PokeymonForm, render_row


def test_row_labels(trio):
    row = render_row(trio[0])
    assert row.name == "Blazeon"
    assert row.type_label == "🔥 Fire"
    assert row.attack_label == "⚔️ 50"
    assert row.defense_label == "🛡️ 30"
    assert row.date_label == "📅 09/10/25"
    assert "Blazeon" in row.text() and "🔥 Fire" in row.text()


def test_add_form_defaults_and_title():
    form = PokeymonForm()
    assert form.title == "Add Pokeymon"
    assert not form.is_editing
    assert form.section_titles == ["Basic Info", "Type", "Stats", "Date Captured"]
    assert form.selected_type is PokeymonType.FIRE
    assert form.attack == 0 and form.defense == 0
    assert form.type_choices()[4] == PokeymonType.ELECTRIC.display


def test_form_rejects_blank_names():
    form = PokeymonForm()
    form.name = "   "
    with pytest.raises(FormValidationError) as exc:
        form.submit()
    assert str(exc.value) == EMPTY_NAME_MESSAGE


def test_form_clamps_stats():
    form = PokeymonForm()
    assert form.set_attack(1200) == 999
    assert form.set_defense(-5) == 0


def test_edit_form_prefills_and_returns_new_value(trio):
    original = trio[2]
    form = PokeymonForm(existing=original)
    assert form.title == "Edit Pokeymon"
    assert form.name == "Voltik"
    assert form.selected_type is PokeymonType.ELECTRIC
    form.set_attack(75)
    form.select_type(PokeymonType.ICE)
    edited = form.submit()
    assert edited.id == original.id
    assert edited.attack == 75
    assert edited.type is PokeymonType.ICE
    assert original.attack == 70


def test_list_controller_add_select_and_delete(store: PokeymonStore, trio):
    controller = ListController(store)
    assert controller.title == "Pokeymon Collection"
    assert controller.reload() is LoadStatus.MISSING
    assert controller.count == 0

    for p in trio:
        assert controller.add(p).ok
    assert [r.name for r in controller.rows()] == ["Blazeon", "Drizzlet", "Voltik"]

    controller.delete_at(1)
    assert [p.name for p in controller.pokeymon] == ["Blazeon", "Voltik"]
    assert [p.name for p in store.load_all()] == ["Blazeon", "Voltik"]

    with pytest.raises(IndexError):
        controller.select(5)


def test_new_form_submission_through_list(store: PokeymonStore):
    controller = ListController(store)
    controller.reload()
    form = controller.new_form()
    form.name = "Blazeon"
    form.select_type(PokeymonType.FIRE)
    form.set_attack(50)
    form.set_defense(30)
    controller.add(form.submit())

    fresh = ListController(store)
    assert fresh.reload() is LoadStatus.OK
    assert fresh.pokeymon[0].name == "Blazeon"


def test_detail_sections_and_edit_flow(store: PokeymonStore, trio):
    store.save_all(trio)
    controller = ListController(store)
    controller.reload()

    detail = controller.select(0)
    assert detail.title == "Details"
    info, stats = detail.sections()
    assert info == (
        "Information",
        [("Name", "Blazeon"), ("Type", "🔥 Fire"), ("Date Captured", "Sep 10, 2025")],
    )
    assert stats == ("Stats", [("⚔️ Attack", "50"), ("🛡️ Defence", "30")])
    assert detail.lines()[0] == "Details"

    form = detail.edit_form()
    form.set_attack(55)
    assert detail.apply(form.submit()).ok

    assert detail.pokeymon.attack == 55
    assert controller.pokeymon[0].attack == 55
    assert store.load_all()[0].attack == 55
    assert trio[0].attack == 50


def test_detail_refuses_values_with_a_different_id(store: PokeymonStore, trio):
    store.save_all(trio)
    controller = ListController(store)
    controller.reload()
    detail = controller.select(0)
    with pytest.raises(ValueError):
        detail.apply(Pokeymon(name="Impostor", type=PokeymonType.FIRE))


def test_corrupt_store_is_flagged_as_data_loss(store: PokeymonStore):
    store.path.parent.mkdir(parents=True)
    store.path.write_text("[1, 2", encoding="utf-8")
    controller = ListController(store)
    assert controller.reload() is LoadStatus.CORRUPT
    assert controller.data_loss
    assert controller.count == 0
    assert controller.load_error


def test_medium_date_uses_capture_date():
    p = Pokeymon(
        name="Frostel",
        type=PokeymonType.ICE,
        date_captured=datetime(2024, 1, 2, tzinfo=timezone.utc),
    )
    assert render_row(p).date_label == "📅 01/02/24"
