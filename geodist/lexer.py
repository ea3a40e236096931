import re
from typing import List, Tuple

Token = Tuple[str, str, int]  # (type, value, col)

SYMBOLS = {
    '(': 'LPAREN',
    ')': 'RPAREN',
    ',': 'COMMA',
}

WS = ' \t\r\n'

_word_re = re.compile(r'[A-Za-z]+')
_num_re = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')

def tokenize(s: str) -> List[Token]:
    tokens: List[Token] = []
    i = 0
    n = len(s)
    while i < n:
        ch = s[i]
        col = i + 1
        if ch in WS:
            i += 1
            continue
        m = _num_re.match(s, i)
        if m:
            tokens.append(('NUMBER', m.group(0), col))
            i = m.end()
            continue
        m = _word_re.match(s, i)
        if m:
            tokens.append(('WORD', m.group(0).upper(), col))
            i = m.end()
            continue
        if ch in SYMBOLS:
            tokens.append((SYMBOLS[ch], ch, col))
            i += 1
            continue
        raise SyntaxError(f'[col {col}] unexpected character: {ch!r}')
    return tokens
