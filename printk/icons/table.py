"""Compiled-in icon table.

Glyphs are Nerd Font code points (Font Awesome and Devicons ranges). Rows are
grouped by category; the row order is the listing order.
"""

from printk.icons.registry import IconEntry

FILES = "Files"
STATUS = "Status"
ARROWS = "Arrows"
UI = "UI"
GIT = "Git"
PROGRAMMING = "Programming"
OS = "OS"
MEDIA = "Media"
NETWORK = "Network"
TIME = "Time"
PEOPLE = "People"
MISC = "Misc"

_ROWS: tuple[tuple[str, str, str], ...] = (
    # Files & folders
    ("folder", "\uf07b", FILES),
    ("file", "\uf15b", FILES),
    ("doc", "\uf718", FILES),
    ("img", "\uf71e", FILES),
    ("pdf", "\uf724", FILES),
    ("zip", "\uf1c6", FILES),
    # Status
    ("ok", "\uf00c", STATUS),
    ("check", "\uf00c", STATUS),
    ("success", "\uf00c", STATUS),
    ("error", "\uf057", STATUS),
    ("fail", "\uf057", STATUS),
    ("warning", "\uf071", STATUS),
    ("warn", "\uf071", STATUS),
    ("info", "\uf05a", STATUS),
    ("question", "\uf128", STATUS),
    ("help", "\uf059", STATUS),
    # Arrows
    ("arrow", "\uf054", ARROWS),
    ("arrow-right", "\uf054", ARROWS),
    ("arrow-left", "\uf053", ARROWS),
    ("arrow-up", "\uf077", ARROWS),
    ("arrow-down", "\uf078", ARROWS),
    # UI
    ("gear", "\uf013", UI),
    ("settings", "\uf013", UI),
    ("home", "\uf015", UI),
    ("star", "\uf005", UI),
    ("heart", "\uf004", UI),
    ("trash", "\uf1f8", UI),
    ("edit", "\uf040", UI),
    ("add", "\uf055", UI),
    ("plus", "\uf055", UI),
    ("minus", "\uf056", UI),
    ("close", "\uf00d", UI),
    ("search", "\uf002", UI),
    # Git
    ("git", "\uf1d3", GIT),
    ("branch", "\ue725", GIT),
    ("commit", "\ue729", GIT),
    ("merge", "\ue727", GIT),
    # Programming
    ("rust", "\ue7a8", PROGRAMMING),
    ("python", "\ue235", PROGRAMMING),
    ("js", "\ue781", PROGRAMMING),
    ("ts", "\ue628", PROGRAMMING),
    ("java", "\ue738", PROGRAMMING),
    ("go", "\ue627", PROGRAMMING),
    ("c", "\ue61e", PROGRAMMING),
    ("cpp", "\ue61d", PROGRAMMING),
    # OS
    ("linux", "\uf17c", OS),
    ("apple", "\uf179", OS),
    ("windows", "\uf17a", OS),
    # Media
    ("play", "\uf04b", MEDIA),
    ("pause", "\uf04c", MEDIA),
    ("stop", "\uf04d", MEDIA),
    ("volume", "\uf028", MEDIA),
    ("mute", "\uf026", MEDIA),
    # Network
    ("wifi", "\uf1eb", NETWORK),
    ("network", "\uf502", NETWORK),
    ("cloud", "\uf0c2", NETWORK),
    ("download", "\uf019", NETWORK),
    ("upload", "\uf093", NETWORK),
    # Time
    ("clock", "\uf017", TIME),
    ("calendar", "\uf073", TIME),
    ("time", "\uf017", TIME),
    # People & security
    ("user", "\uf007", PEOPLE),
    ("users", "\uf0c0", PEOPLE),
    ("lock", "\uf023", PEOPLE),
    ("unlock", "\uf09c", PEOPLE),
    ("demo", "\uf0c3", MISC),
)

ICON_TABLE: tuple[IconEntry, ...] = tuple(
    IconEntry(key=key, glyph=glyph, category=category)
    for key, glyph, category in _ROWS
)
