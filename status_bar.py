import os


def render_status(context, width):
    """
    context keys: status_msg, mode, file_path, shown, total, dirty, filter_query
    """
    if context.get('status_msg'):
        text = f" {context['status_msg']}"
    else:
        mode = context.get('mode', 'normal').upper().replace('_', '-')
        fname = context.get('file_path') or ''
        if fname:
            fname = os.path.basename(fname)
        total = context.get('total', 0)
        shown = context.get('shown', total)
        count = f"{total} fruits" if shown == total else f"{shown}/{total} fruits"
        parts = [mode, fname, count]
        if context.get('filter_query'):
            parts.append(f"/{context['filter_query']}")
        if context.get('dirty'):
            parts.append("[+]")
        text = " " + " | ".join(p for p in parts if p)

    return text.ljust(width)[:width]
