"""Shared fixtures: a stand-in for a curses window."""

import pytest


class FakeScreen:
    """Records what the renderer writes; replays scripted key presses."""

    def __init__(self, rows=24, columns=80, keys=()):
        self.rows = rows
        self.columns = columns
        self.keys = list(keys)
        self.writes = []
        self.timeouts = []
        self.erased = 0
        self.refreshed = 0

    def getmaxyx(self):
        return self.rows, self.columns

    def erase(self):
        self.erased += 1
        self.writes = []

    def addstr(self, y, x, text, attr=0):
        self.writes.append((y, x, text, attr))

    def bkgd(self, ch, attr=0):
        pass

    def refresh(self):
        self.refreshed += 1

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeouts.append(ms)

    def getch(self):
        return self.keys.pop(0) if self.keys else -1


@pytest.fixture
def screen():
    return FakeScreen()


@pytest.fixture
def make_screen():
    return FakeScreen
