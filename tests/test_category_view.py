"""
Tests for the category view's form: typed text lives in the synchronizer
draft and survives list refreshes. Skipped where no display is available.
"""

from types import SimpleNamespace

import pytest

tk = pytest.importorskip("tkinter")

from categorydesk.operations import CategorySynchronizer

from conftest import FakeCategoryAPI, THREE_CATEGORIES


@pytest.fixture
def root():
    try:
        window = tk.Tk()
    except tk.TclError:
        pytest.skip("no display available")
    window.withdraw()
    yield window
    window.destroy()


@pytest.fixture
def view(root):
    from categorydesk.gui.category_view import CategoryView

    sync = CategorySynchronizer(FakeCategoryAPI(THREE_CATEGORIES))
    gui = SimpleNamespace(
        shell=SimpleNamespace(synchronizer=sync),
        config_mgr=SimpleNamespace(get=lambda key, default=None: False),
        logout=lambda: None,
        run_in_background=lambda work, on_done: on_done(work()),
        update_status_bar=lambda text: None,
    )
    view = CategoryView(root, gui)
    sync.on_change = view.refresh
    sync.load()
    return view


def test_typed_text_is_kept_when_a_delete_completes(view):
    view.name_var.set("Toys")
    view.description_var.set("Lego")

    view.listbox.selection_set(0)
    view.on_delete()

    assert len(view.sync.categories) == 2
    assert view.name_var.get() == "Toys"
    assert view.description_var.get() == "Lego"


def test_typed_text_is_kept_across_reload(view):
    view.name_var.set("Toys")
    view.sync.load()

    assert view.name_var.get() == "Toys"


def test_save_clears_both_entries(view):
    view.name_var.set("Toys")
    view.description_var.set("Lego")

    view.on_save()

    assert view.sync.categories[-1].name == "Toys"
    assert view.name_var.get() == ""
    assert view.description_var.get() == ""


def test_begin_edit_fills_entries(view):
    view.listbox.selection_set(1)
    view.on_edit()

    assert view.name_var.get() == "Music"
    assert view.description_var.get() == "Vinyl and CDs"
    assert view.save_button.cget("text") == "Update Category"
