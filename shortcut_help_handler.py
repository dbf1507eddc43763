class ShortcutHelpHandler:
    _SECTIONS = [
        ("Browse", [
            ("j / Down", "next fruit"),
            ("k / Up", "previous fruit"),
            ("/", "filter by name"),
            ("a", "add fruit"),
            ("e", "edit selected fruit"),
            ("d", "delete selected fruit"),
            ("Ctrl+S", "save catalogue"),
            ("q / Esc", "quit (dismisses messages first)"),
            ("Ctrl+X", "discard unsaved changes and quit"),
            ("?", "this help"),
        ]),
        ("Filter", [
            ("type", "narrow the list"),
            ("Enter", "keep filter and browse"),
            ("Esc", "clear filter"),
        ]),
        ("Add / Edit", [
            ("Tab / Shift+Tab", "next / previous field"),
            ("Enter", "save fruit"),
            ("Esc / q", "cancel"),
        ]),
        ("Delete", [
            ("y", "confirm"),
            ("n / Esc", "cancel"),
        ]),
    ]

    @classmethod
    def get_lines(cls) -> list[str]:
        key_w = max(len(k) for _, keys in cls._SECTIONS for k, _ in keys)
        lines = []
        for title, keys in cls._SECTIONS:
            if lines:
                lines.append("")
            lines.append(title)
            for key, desc in keys:
                lines.append(f"  {key.ljust(key_w)}  {desc}")
        lines.append("")
        lines.append("Esc / q / ? / Enter to close")
        return lines
