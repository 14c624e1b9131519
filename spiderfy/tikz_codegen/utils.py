import unicodedata

_LATEX_SPECIALS = {
    '\\': r'\textbackslash{}',
    '&':  r'\&',
    '%':  r'\%',
    '$':  r'\$',
    '#':  r'\#',
    '_':  r'\_',
    '{':  r'\{',
    '}':  r'\}',
    '~':  r'\textasciitilde{}',
    '^':  r'\textasciicircum{}',
}


def _strip_combining(text: str) -> str:
    text = unicodedata.normalize('NFC', text)
    return ''.join(ch for ch in text if unicodedata.category(ch) != 'Mn')


def latex_escape(text: str) -> str:
    """Escape marker labels and titles for LaTeX text mode."""
    return ''.join(_LATEX_SPECIALS.get(c, c) for c in _strip_combining(text))
