#!/usr/bin/env python3
"""
Old Phone Pad Decoder

Decode key presses typed on an old mobile phone keypad into text.

Input is a string of digits, spaces and asterisks ending in '#':
    - repeated digits select a letter on that key (clamped to the last one)
    - a space is a pause between two presses of the same key
    - '*' is backspace
    - '#' sends the message

Examples:
    # Decode
    python3 oldphonepad.py decode "4433555 555666#"
    # Output: HELLO

    # Backspace
    python3 oldphonepad.py decode "227*#"
    # Output: B

    # Show how the key presses are grouped
    python3 oldphonepad.py analyze "8 88777444666*664#"

    # Encode
    python3 oldphonepad.py encode "hello"
    # Output: 4433555 555666#
"""

import re
import sys
import argparse
from pathlib import Path
from types import MappingProxyType
from typing import Iterator, NamedTuple, Optional


# Keypad Mapping

TERMINATOR = '#'
BACKSPACE = '*'
PAUSE = ' '

KEYPAD = MappingProxyType({
    '0': ' ',
    '1': "&'(",
    '2': 'ABC',
    '3': 'DEF',
    '4': 'GHI',
    '5': 'JKL',
    '6': 'MNO',
    '7': 'PQRS',
    '8': 'TUV',
    '9': 'WXYZ',
})

# Reverse mapping: character -> (key, presses)
CHAR_MAP = {
    char: (key, pos)
    for key, chars in KEYPAD.items()
    for pos, char in enumerate(chars, 1)
}

RUN_PATTERN = re.compile(r'([0-9])\1*')
VALID_PATTERN = re.compile(r'[0-9 *]*#')


# Errors

class AbsentInputError(TypeError):
    """No input was given at all."""


class PadInputError(ValueError):
    """Base class for key sequences that cannot be processed."""


class MissingTerminatorError(PadInputError):
    pass


class MalformedInputError(PadInputError):
    pass


class UnsupportedCharacterError(PadInputError):
    pass


# Key-press runs

class KeyRun(NamedTuple):
    """A maximal run of one repeated digit."""
    position: int
    text: str
    key: str
    count: int

    @property
    def char(self) -> Optional[str]:
        return char_for_press(self.key, self.count)


def char_for_press(key: str, count: int) -> Optional[str]:
    """
    Resolve a key pressed `count` times to its character.

    Pressing past the last character keeps selecting the last one, so
    '2' pressed nine times is still 'C'. Returns None for an unknown key
    or a count below 1.
    """
    chars = KEYPAD.get(key)
    if chars is None or count < 1:
        return None

    count = min(count, len(chars))
    return chars[count - 1]


def find_runs(sequence: str) -> Iterator[KeyRun]:
    """Yield every run of one repeated digit in `sequence`, left to right."""
    for match in RUN_PATTERN.finditer(sequence):
        yield KeyRun(
            position=match.start(),
            text=match.group(0),
            key=match.group(1),
            count=len(match.group(0)),
        )


# Decoding

def validate(text: Optional[str]) -> str:
    """
    Check a key sequence and return its body without the trailing '#'.

    Raises AbsentInputError for None, MissingTerminatorError when the
    sequence does not end in '#', and MalformedInputError for any other
    character (including a '#' before the end).
    """
    if text is None:
        raise AbsentInputError('Input is required')

    if not text or text[-1] != TERMINATOR:
        raise MissingTerminatorError(
            f"Input must end with '{TERMINATOR}' to send the message"
        )

    if not VALID_PATTERN.fullmatch(text):
        raise MalformedInputError('Input contains invalid characters')

    return text[:-1]


def decode(text: Optional[str]) -> str:
    """Decode a '#'-terminated key sequence to the message it types."""
    sequence = validate(text)
    buffer = []

    i = 0
    while i < len(sequence):
        char = sequence[i]

        if char == BACKSPACE:
            if buffer:
                buffer.pop()
            i += 1

        elif char == PAUSE:
            i += 1

        else:
            match = RUN_PATTERN.match(sequence, i)
            if match is None:
                i += 1
                continue

            resolved = char_for_press(match.group(1), len(match.group(0)))
            if resolved is not None:
                buffer.append(resolved)
            i = match.end()

    return ''.join(buffer)


def analyze(text: Optional[str]) -> str:
    """Describe how a key sequence is split into key presses. Never fails."""
    if not text:
        return 'Empty input'

    sequence = text[:-1] if text.endswith(TERMINATOR) else text

    lines = [
        'Input Analysis:',
        f'Original: {text}',
        '',
        'Consecutive Digit Matches:',
    ]
    for run in find_runs(sequence):
        char = run.char
        shown = f"'{char}'" if char is not None else 'none'
        lines.append(
            f"  Position {run.position}: '{run.text}' -> Key '{run.key}' "
            f"pressed {run.count} time(s) -> {shown}"
        )

    return '\n'.join(lines) + '\n'


# Encoding

def encode(text: str) -> str:
    """
    Encode text to the key sequence that types it, ending in '#'.

    Consecutive characters on the same key are separated by a pause.
    """
    parts = []
    last_key = None

    for char in text.upper():
        if char not in CHAR_MAP:
            raise UnsupportedCharacterError(f"Unsupported character: '{char}'")

        key, count = CHAR_MAP[char]
        if key == last_key:
            parts.append(PAUSE)
        parts.append(key * count)
        last_key = key

    return ''.join(parts) + TERMINATOR


# File I/O

def read_input(path: str) -> str:
    """Read input from file or stdin, dropping the line ending."""
    if path == '-':
        return sys.stdin.read().rstrip('\r\n')

    try:
        return Path(path).read_text(encoding='utf-8').rstrip('\r\n')
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except UnicodeDecodeError:
        print(f"Error: Invalid UTF-8 encoding: {path}", file=sys.stderr)
        sys.exit(1)


def write_output(content: str, path: Optional[str]) -> None:
    """Write output to file or stdout."""
    if path:
        try:
            Path(path).write_text(content + '\n', encoding='utf-8')
            print(f"Saved: {path}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing file: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        print(content)


COMMANDS = {
    'decode': decode,
    'analyze': analyze,
    'encode': encode,
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Old phone keypad decoder',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    subparsers = parser.add_subparsers(dest='command', required=True,
                                       help='Operation mode')

    for name, help_text, arg_help in (
        ('decode', 'Decode key presses to text',
         "Key sequence ending in '#' (or use -i for file)"),
        ('analyze', 'Show how key presses are grouped',
         'Key sequence to inspect (or use -i for file)'),
        ('encode', 'Encode text to key presses',
         'Text to encode (or use -i for file)'),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument('data', nargs='?', help=arg_help)
        sub.add_argument('-i', '--input',
                         help='Input file (use - for stdin)')
        sub.add_argument('-o', '--output',
                         help='Output file (default: stdout)')

    args = parser.parse_args(argv)

    try:
        if args.input:
            input_data = read_input(args.input)
        elif args.data is not None:
            input_data = args.data
        else:
            parser.error('Provide input or use -i for file input')

        result = COMMANDS[args.command](input_data)

        write_output(result.rstrip('\n'), args.output)

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
