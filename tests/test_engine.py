"""
Tests moteur d'édition — sections, blocs, sélection, drag, vue, historique.
"""
import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from template_builder.core import BlockRef, BlockType, DropTarget, SectionRef, blank_template
from template_builder.editor import BuilderEngine


# ── Fixtures ─────────────────────────────────────────────────────────────────

@pytest.fixture
def engine():
    """Engine avec un template vide (aucune section)."""
    e = BuilderEngine()
    e.set_template(blank_template("Home", with_main_section=False))
    return e


@pytest.fixture
def filled(engine):
    """Deux sections ; la première contient trois blocs."""
    s1 = engine.add_section()
    s2 = engine.add_section()
    for block_type in ("article-grid", "heading", "big-hero"):
        engine.add_block_from_type(s1.id, block_type)
    engine.history.clear()
    engine.mark_saved()
    return engine


def _ids(items):
    return [i.id for i in items]


# ── Scénarios ────────────────────────────────────────────────────────────────

class TestScenarios:
    def test_add_section_then_block(self, engine):
        section = engine.add_section()
        engine.add_block_from_type(section.id, "article-grid")

        assert len(engine.sections) == 1
        blocks = engine.sections[0].blocks
        assert len(blocks) == 1
        assert blocks[0].type is BlockType.ARTICLE_GRID
        assert blocks[0].variant == engine.registry.default_variant_name("article-grid")
        assert blocks[0].config == {}

    def test_move_section_swaps_two(self, engine):
        s1 = engine.add_section()
        s2 = engine.add_section()
        engine.move_section(0, 1)
        assert _ids(engine.sections) == [s2.id, s1.id]

    def test_duplicate_block_inserted_after_original(self, filled):
        section = filled.sections[0]
        b1, b2, b3 = section.blocks
        filled.update_block(section.id, b2.id, {"config": {"level": 2}})
        b2 = filled.find_block(section.id, b2.id)[1]

        copy = filled.duplicate_block(section.id, b2.id)

        blocks = filled.sections[0].blocks
        assert len(blocks) == 4
        assert _ids(blocks) == [b1.id, b2.id, copy.id, b3.id]
        assert copy.id != b2.id
        assert (copy.type, copy.variant, copy.config) == (b2.type, b2.variant, b2.config)


# ── Sections ─────────────────────────────────────────────────────────────────

class TestSections:
    def test_add_section_selects_it(self, engine):
        section = engine.add_section()
        assert engine.state.selected == SectionRef(id=section.id)

    def test_add_section_at_position(self, filled):
        section = filled.add_section(0)
        assert filled.sections[0].id == section.id

    def test_add_section_position_clamped(self, filled):
        section = filled.add_section(99)
        assert filled.sections[-1].id == section.id

    def test_order_follows_list_position(self, filled):
        filled.add_section(1)
        filled.move_section(2, 0)
        assert [s.order for s in filled.sections] == [0, 1, 2]

    def test_ids_unique_after_many_operations(self, engine):
        for _ in range(5):
            engine.add_section()
        engine.duplicate_section(engine.sections[0].id)
        engine.delete_section(engine.sections[2].id)
        engine.move_section(0, 4)
        ids = _ids(engine.sections)
        assert len(ids) == len(set(ids)) == 5

    def test_delete_section(self, filled):
        s1, s2 = filled.sections
        assert filled.delete_section(s1.id) is True
        assert _ids(filled.sections) == [s2.id]

    def test_delete_section_clears_selection_and_hover(self, filled):
        s1 = filled.sections[0]
        filled.select_element(SectionRef(id=s1.id))
        filled.hover_element(SectionRef(id=s1.id))
        filled.delete_section(s1.id)
        assert filled.state.selected is None
        assert filled.state.hovered is None

    def test_delete_section_clears_selection_of_contained_block(self, filled):
        s1 = filled.sections[0]
        filled.select_element(BlockRef(id=s1.blocks[1].id, section_id=s1.id))
        filled.delete_section(s1.id)
        assert filled.state.selected is None

    def test_delete_section_keeps_unrelated_selection(self, filled):
        s1, s2 = filled.sections
        filled.select_element(SectionRef(id=s2.id))
        filled.delete_section(s1.id)
        assert filled.state.selected == SectionRef(id=s2.id)

    def test_duplicate_section_fresh_ids(self, filled):
        s1 = filled.sections[0]
        copy = filled.duplicate_section(s1.id)

        assert _ids(filled.sections)[:2] == [s1.id, copy.id]
        assert copy.id != s1.id
        assert len(copy.blocks) == len(s1.blocks)
        assert not set(_ids(copy.blocks)) & set(_ids(s1.blocks))
        strip = lambda b: b.model_dump(exclude={"id"})
        assert [strip(b) for b in copy.blocks] == [strip(b) for b in s1.blocks]
        assert copy.name == s1.name

    def test_duplicate_is_independent(self, filled):
        s1 = filled.sections[0]
        copy = filled.duplicate_section(s1.id)
        filled.update_block(copy.id, copy.blocks[0].id, {"config": {"x": 1}})
        assert filled.sections[0].blocks[0].config == {}

    def test_move_section_round_trip(self, engine):
        for _ in range(4):
            engine.add_section()
        before = _ids(engine.sections)
        engine.move_section(0, 3)
        engine.move_section(3, 0)
        assert _ids(engine.sections) == before

    @pytest.mark.parametrize("frm,to", [(0, 0), (-1, 0), (0, 2), (5, 1)])
    def test_move_section_noop(self, filled, frm, to):
        before = _ids(filled.sections)
        assert filled.move_section(frm, to) is False
        assert _ids(filled.sections) == before
        assert not filled.can_undo

    def test_move_section_up_down(self, filled):
        s1, s2 = filled.sections
        assert filled.move_section_down(s1.id) is True
        assert _ids(filled.sections) == [s2.id, s1.id]
        assert filled.move_section_up(s1.id) is True
        assert filled.move_section_up(s1.id) is False

    def test_update_section(self, filled):
        s1 = filled.sections[0]
        updated = filled.update_section(s1.id, {"name": "Hero", "container": "wide"})
        assert updated.name == "Hero"
        assert filled.sections[0].container == "wide"
        assert len(filled.sections[0].blocks) == 3

    def test_update_section_protects_id_and_blocks(self, filled):
        s1 = filled.sections[0]
        filled.update_section(s1.id, {"id": "hacked", "blocks": [], "name": "X"})
        assert filled.sections[0].id == s1.id
        assert len(filled.sections[0].blocks) == 3

    def test_update_section_invalid_is_noop(self, filled):
        s1 = filled.sections[0]
        assert filled.update_section(s1.id, {"container": "gigantic"}) is None
        assert filled.sections[0].container == "normal"
        assert not filled.state.is_dirty


# ── Blocs ────────────────────────────────────────────────────────────────────

class TestBlocks:
    def test_add_block_selects_it(self, filled):
        sid = filled.sections[1].id
        block = filled.add_block_from_type(sid, "spacer")
        assert filled.state.selected == BlockRef(id=block.id, section_id=sid)

    def test_add_block_with_data_source(self, filled):
        block = filled.add_block_from_type(filled.sections[1].id, "article-list")
        assert block.data_source is not None
        assert filled.add_block_from_type(filled.sections[1].id, "divider").data_source is None

    def test_add_block_at_index(self, filled):
        sid = filled.sections[0].id
        block = filled.add_block_from_type(sid, "spacer", 1)
        assert filled.sections[0].blocks[1].id == block.id

    def test_add_block_unknown_type_is_noop(self, filled):
        sid = filled.sections[0].id
        assert filled.add_block_from_type(sid, "mystery") is None
        assert len(filled.sections[0].blocks) == 3
        assert not filled.state.is_dirty

    def test_add_block_unknown_section_is_noop(self, filled):
        selected = filled.state.selected
        assert filled.add_block_from_type("section_missing", "heading") is None
        assert filled.state.selected == selected

    def test_add_then_delete_restores_section(self, filled):
        section = filled.sections[0]
        before = section.model_dump()
        block = filled.add_block_from_type(section.id, "poll-widget")
        filled.delete_block(section.id, block.id)
        assert filled.sections[0].model_dump() == before

    def test_delete_block_clears_selection_and_hover(self, filled):
        section = filled.sections[0]
        block = section.blocks[0]
        ref = BlockRef(id=block.id, section_id=section.id)
        filled.select_element(ref)
        filled.hover_element(ref)
        assert filled.delete_block(section.id, block.id) is True
        assert filled.state.selected is None
        assert filled.state.hovered is None

    def test_delete_block_wrong_section_is_noop(self, filled):
        s1, s2 = filled.sections
        assert filled.delete_block(s2.id, s1.blocks[0].id) is False
        assert len(filled.sections[0].blocks) == 3

    def test_update_block_deep_merges_config(self, filled):
        section = filled.sections[0]
        bid = section.blocks[0].id
        filled.update_block(section.id, bid, {"config": {"grid": {"columns": {"desktop": 4}}}})
        filled.update_block(section.id, bid, {"config": {"grid": {"gap": "sm"}}})
        block = filled.find_block(section.id, bid)[1]
        assert block.config == {"grid": {"columns": {"desktop": 4}, "gap": "sm"}}

    def test_update_block_variant_and_protected_id(self, filled):
        section = filled.sections[0]
        bid = section.blocks[0].id
        updated = filled.update_block(section.id, bid, {"id": "other", "variant": "grid-3"})
        assert updated.id == bid
        assert updated.variant == "grid-3"

    def test_update_block_invalid_is_noop(self, filled):
        section = filled.sections[0]
        bid = section.blocks[0].id
        assert filled.update_block(section.id, bid, {"type": "mystery"}) is None
        assert filled.find_block(section.id, bid)[1].type is BlockType.ARTICLE_GRID

    def test_duplicate_block_missing_is_noop(self, filled):
        assert filled.duplicate_block(filled.sections[0].id, "block_missing") is None

    def test_move_block_within_section(self, filled):
        section = filled.sections[0]
        b1, b2, b3 = _ids(section.blocks)
        assert filled.move_block(section.id, section.id, 0, 2) is True
        assert _ids(filled.sections[0].blocks) == [b2, b3, b1]

    def test_move_block_across_sections_updates_selection(self, filled):
        s1, s2 = filled.sections
        block = s1.blocks[0]
        filled.select_element(BlockRef(id=block.id, section_id=s1.id))
        assert filled.move_block(s1.id, s2.id, 0, 0) is True
        assert _ids(filled.sections[1].blocks) == [block.id]
        assert len(filled.sections[0].blocks) == 2
        assert filled.state.selected == BlockRef(id=block.id, section_id=s2.id)

    @pytest.mark.parametrize("frm,to", [(5, 0), (0, 3), (1, 1)])
    def test_move_block_out_of_range_is_noop(self, filled, frm, to):
        section = filled.sections[0]
        before = _ids(section.blocks)
        assert filled.move_block(section.id, section.id, frm, to) is False
        assert _ids(filled.sections[0].blocks) == before


# ── Sélection / drag ─────────────────────────────────────────────────────────

class TestTransientState:
    def test_select_and_clear(self, filled):
        ref = SectionRef(id=filled.sections[0].id)
        filled.select_element(ref)
        assert filled.selected_section().id == ref.id
        filled.clear_selection()
        assert filled.state.selected is None

    def test_selected_block(self, filled):
        section = filled.sections[0]
        block = section.blocks[2]
        filled.select_element(BlockRef(id=block.id, section_id=section.id))
        assert filled.selected_block().id == block.id
        assert filled.selected_section().id == section.id

    def test_select_unknown_id_is_harmless(self, filled):
        filled.select_element(SectionRef(id="section_ghost"))
        assert filled.selected_section() is None

    def test_drag_lifecycle(self, filled):
        sid = filled.sections[0].id
        filled.start_drag("heading")
        assert filled.state.is_dragging
        filled.update_drop_target(DropTarget(section_id=sid, index=1))
        assert filled.state.drop_target.index == 1
        filled.end_drag()
        assert filled.state.mode == "idle"
        assert filled.state.drop_target is None
        assert filled.state.dragged_item is None

    def test_drop_target_ignored_when_idle(self, filled):
        filled.update_drop_target(DropTarget(section_id=filled.sections[0].id))
        assert filled.state.drop_target is None

    def test_aborted_drag_does_not_mutate(self, filled):
        before = filled.template.model_dump()
        filled.start_drag("heading")
        filled.update_drop_target(DropTarget(section_id=filled.sections[0].id))
        filled.end_drag()
        assert filled.template.model_dump() == before
        assert not filled.state.is_dirty


# ── Vue ──────────────────────────────────────────────────────────────────────

class TestView:
    @pytest.mark.parametrize("zoom,expected", [(10, 25), (100, 100), (150, 150), (500, 200)])
    def test_zoom_clamped(self, engine, zoom, expected):
        engine.set_zoom(zoom)
        assert engine.state.zoom == expected

    def test_viewport(self, engine):
        engine.set_viewport_size("mobile")
        assert engine.state.viewport_size == "mobile"

    def test_toggles(self, engine):
        grid, outlines = engine.state.show_grid, engine.state.show_outlines
        engine.toggle_grid()
        engine.toggle_outlines()
        assert engine.state.show_grid is not grid
        assert engine.state.show_outlines is not outlines

    def test_preview_clears_selection(self, filled):
        filled.select_element(SectionRef(id=filled.sections[0].id))
        filled.toggle_preview_mode()
        assert filled.state.preview_mode is True
        assert filled.state.selected is None
        filled.toggle_preview_mode()
        assert filled.state.preview_mode is False


# ── Historique / template ────────────────────────────────────────────────────

class TestHistory:
    def test_undo_redo_add_section(self, engine):
        section = engine.add_section()
        assert engine.undo() is True
        assert engine.sections == []
        assert engine.redo() is True
        assert _ids(engine.sections) == [section.id]

    def test_undo_nothing(self, engine):
        assert engine.can_undo is False
        assert engine.undo() is False

    def test_new_edit_drops_redo_branch(self, engine):
        engine.add_section()
        engine.undo()
        assert engine.can_redo
        engine.add_section()
        assert not engine.can_redo

    def test_history_bounded(self):
        e = BuilderEngine(history_limit=3)
        e.set_template(blank_template(with_main_section=False))
        for _ in range(5):
            e.add_section()
        undone = 0
        while e.undo():
            undone += 1
        assert undone == 3
        assert len(e.sections) == 2

    def test_mutation_marks_dirty_and_notifies(self, engine):
        actions = []
        unsubscribe = engine.subscribe(actions.append)
        engine.add_section()
        assert engine.state.is_dirty
        assert actions == ["Add Section"]
        unsubscribe()
        engine.add_section()
        assert actions == ["Add Section"]

    def test_noop_does_not_notify(self, engine):
        actions = []
        engine.subscribe(actions.append)
        engine.delete_section("section_missing")
        assert actions == []

    def test_undo_actions_labels(self, engine):
        section = engine.add_section()
        engine.delete_section(section.id)
        assert engine.undo_actions == ["Add Section", "Delete Section"]
        engine.undo()
        assert engine.undo_actions == ["Add Section"]
        engine.redo()
        assert engine.undo_actions == ["Add Section", "Delete Section"]

    def test_undo_redo_bump_revision(self, engine):
        engine.add_section()
        revision = engine.revision
        engine.undo()
        assert engine.revision == revision + 1
        engine.redo()
        assert engine.revision == revision + 2

    def test_mark_saved_stale_revision_keeps_dirty(self, engine):
        engine.add_section()
        snapshot = engine.template.model_copy(deep=True)
        revision = engine.revision
        engine.add_section()
        assert engine.mark_saved(snapshot, revision) is False
        assert engine.state.is_dirty
        assert len(engine.state.original_template.sections) == 1
        assert engine.state.last_saved is not None

    def test_mark_saved_current_revision_cleans(self, engine):
        engine.add_section()
        assert engine.mark_saved(engine.template, engine.revision) is True
        assert not engine.state.is_dirty

    def test_reset_template(self, filled):
        snapshot = filled.template.model_dump()
        filled.add_section()
        filled.delete_block(filled.sections[0].id, filled.sections[0].blocks[0].id)
        assert filled.reset_template() is True
        assert filled.template.model_dump() == snapshot
        assert not filled.state.is_dirty

    def test_update_template(self, engine):
        tpl = engine.update_template(name="Sports", id="nope", sections=["x"], unknown=1)
        assert tpl.name == "Sports"
        assert tpl.id != "nope"
        assert engine.sections == []

    def test_mark_saved(self, filled):
        filled.add_section()
        filled.mark_saved()
        assert not filled.state.is_dirty
        assert filled.state.last_saved is not None
        assert len(filled.state.original_template.sections) == 3

    def test_errors(self, engine):
        engine.add_error("save_failed", "Network down")
        assert engine.state.errors[0].code == "save_failed"
        engine.clear_errors()
        assert engine.state.errors == []


# ── Sans template ────────────────────────────────────────────────────────────

def test_operations_without_template_are_noops():
    engine = BuilderEngine()
    assert engine.add_section() is None
    assert engine.delete_section("s") is False
    assert engine.duplicate_section("s") is None
    assert engine.move_section(0, 1) is False
    assert engine.add_block_from_type("s", "heading") is None
    assert engine.undo() is False
    assert engine.update_template(name="x") is None
    assert engine.template is None
