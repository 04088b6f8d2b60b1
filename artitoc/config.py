import re

# Matches lines written by \artitocTitle, e.g. "title:12:On Method"
TITLE_LINE_RE = re.compile(r"^title:([0-9]+):(.*)$")

# Matches lines written by \artitocAuthor. The first name stops at the first
# colon; the last name takes the rest of the line.
AUTHOR_LINE_RE = re.compile(r"^author:([0-9]+):([^:]*):(.*)$")

# Leading particles ignored (or glued on) when alphabetizing "Last, First".
# First match wins, so "van der " must come before "van ".
PARTICLES = (
    ("de ", ""),
    ("van der ", ""),
    ("van ", ""),
    ("von ", ""),
    ("du ", "du"),
    ("Du ", "Du"),
)

# (and_text, and2_text): separator before the last of 3+ authors, and
# between exactly two authors.
CONJUNCTIONS = {
    "en": (", and ", " and "),
    "fr": (" et ", " et "),
}

DEFAULT_LANG = "en"

# Target of \hyperlink for page N, as created by hyperref
PAGE_ANCHOR_PREFIX = "page."

LATEX_ESCAPES = {
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}
