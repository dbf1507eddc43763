import curses


class ScreenLayout:
    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.H, self.W = stdscr.getmaxyx()

        # layout: fruit list (60%) | details (40%), status bar (1 line)
        self.status_h = 1
        self.body_h = max(1, self.H - self.status_h)
        self.list_w = max(1, self.W * 60 // 100)
        self.details_w = max(1, self.W - self.list_w)

        self.list_win = curses.newwin(self.body_h, self.list_w, 0, 0)
        self.list_win.leaveok(True)

        self.details_win = curses.newwin(self.body_h, self.details_w, 0, self.list_w)
        self.details_win.leaveok(True)

        self.status_win = curses.newwin(self.status_h, self.W, self.body_h, 0)
        self.status_win.leaveok(True)

    def centered(self, pct_w, pct_h, min_h=3):
        return centered_rect(pct_w, pct_h, self.H, self.W, min_h=min_h)


def centered_rect(pct_w, pct_h, total_h, total_w, min_h=3):
    """Return (h, w, y, x) of a box centered in a total_h x total_w screen."""
    h = min(total_h, max(min_h, total_h * pct_h // 100))
    w = min(total_w, max(10, total_w * pct_w // 100))
    y = max(0, (total_h - h) // 2)
    x = max(0, (total_w - w) // 2)
    return h, w, y, x
