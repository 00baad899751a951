def re_anchor(r):
    return r'^' + r + r'\Z'


def re_alternation(patterns):
    """Join regex subpatterns into a single non-capturing alternation group"""
    return r'(?:' + r'|'.join(patterns) + r')'


def char_class_escape(chars):
    """Escape characters for use inside a regex character class"""
    return ''.join(['\\' + c if c in '\\]^-[' else c for c in chars])


def unique_upper(tokens):
    """Upper-case tokens, dropping duplicates while keeping first-seen order"""
    seen = set()
    ret = []
    for token in tokens:
        token = token.upper()
        if token not in seen:
            seen.add(token)
            ret.append(token)
    return ret
