from shortcut_help_handler import ShortcutHelpHandler


def test_help_lines_cover_every_mode():
    lines = ShortcutHelpHandler.get_lines()
    for title in ("Browse", "Filter", "Add / Edit", "Delete"):
        assert title in lines
    assert any("Ctrl+S" in line for line in lines)
    assert lines[-1] == "Esc / q / ? / Enter to close"
