"""Single ASCII character options, with names for the hard-to-type ones.

The 32 control characters are spelled by their mnemonics (``nul`` .. ``us``)
and most punctuation has a three letter alias, so ``-s ht`` is a tab and
``-s pip`` a pipe.
"""

CONTROL_NAMES = (
    "nul", "soh", "stx", "etx", "eot", "enq", "ack", "bel",
    "bs", "ht", "lf", "vt", "ff", "cr", "so", "si",
    "dle", "dc1", "dc2", "dc3", "dc4", "nak", "syn", "etb",
    "can", "em", "sub", "esc", "fs", "gs", "rs", "us",
)

SYMBOL_NAMES = {
    "sp": " ", "exc": "!", "quo": '"', "hsh": "#", "dol": "$", "pct": "%",
    "amp": "&", "squ": "'", "lpr": "(", "rpr": ")", "ast": "*", "plu": "+",
    "com": ",", "hyp": "-", "dot": ".", "sl": "/",
    "col": ":", "sem": ";", "lt": "<", "eq": "=", "gt": ">", "que": "?", "at": "@",
    "lbr": "[", "bsl": "\\", "rbr": "]", "car": "^", "und": "_", "tic": "`",
    "lbc": "{", "pip": "|", "rbc": "}", "til": "~", "del": "\x7f",
}

NAMED = {name: chr(code) for code, name in enumerate(CONTROL_NAMES)}
NAMED.update(SYMBOL_NAMES)

TRIM_POLICIES = {
    "h": "headers",
    "headers": "headers",
    "f": "fields",
    "fields": "fields",
    "hf": "all",
    "fh": "all",
    "both": "all",
    "all": "all",
}


def parse_char(text: str) -> str:
    """Resolve a single-character option; raises ValueError when invalid."""
    if text in NAMED:
        return NAMED[text]
    if len(text) == 1 and text.isascii():
        return text
    raise ValueError(
        "The delimiter must be a single ASCII character or an accepted special symbol."
    )


def parse_terminator(text: str) -> str | None:
    """``crlf`` (any of \\r, \\n, \\r\\n) becomes None, anything else one character."""
    if text == "crlf":
        return None
    return parse_char(text)


def parse_trim(text: str) -> str:
    return TRIM_POLICIES.get(text, "none")
