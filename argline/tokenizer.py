# Argline CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits an input line into position-preserving `Argument` tokens.

Whitespace before a token becomes that token's prefix. A token that opens
with a single or double quote keeps the quote in its prefix and the matching
closing quote in its suffix, so quoted text may contain spaces. Whitespace
after the last token is kept in that token's suffix, which lets completers
tell "typing a token" from "finished a token".

The tokenizer does not process escapes and knows nothing about pipes, globs
or subshells.

Example:
    tokenize("echo 'a b'  c")
    → [Argument('echo', '', '', 0, 4),
       Argument('a b', " '", "'", 4, 10),
       Argument('c', '  ', '', 10, 13)]
"""
from argline.argument import Argument

QUOTES = ("'", '"')


def tokenize(text: str) -> list[Argument]:
    """
    Convert `text` into a list of Arguments.

    The concatenation of `str(arg)` over the result is always `text`, and
    each argument's `start`/`end` span exactly its rendered form.
    """
    args: list[Argument] = []
    position = 0
    length = len(text)

    while position < length:
        start = position
        while position < length and text[position].isspace():
            position += 1

        if position == length:
            trailing = text[start:]
            if args:
                last = args.pop()
                args.append(
                    Argument(
                        last.text,
                        last.prefix,
                        last.suffix + trailing,
                        last.start,
                        length,
                    )
                )
            else:
                args.append(Argument("", trailing, "", start, length))
            break

        if text[position] in QUOTES:
            quote = text[position]
            close = text.find(quote, position + 1)
            prefix = text[start : position + 1]
            if close == -1:
                args.append(Argument(text[position + 1 :], prefix, "", start, length))
                position = length
            else:
                args.append(
                    Argument(text[position + 1 : close], prefix, quote, start, close + 1)
                )
                position = close + 1
            continue

        token_start = position
        while (
            position < length
            and not text[position].isspace()
            and text[position] not in QUOTES
        ):
            position += 1
        args.append(
            Argument(
                text[token_start:position], text[start:token_start], "", start, position
            )
        )

    return args
