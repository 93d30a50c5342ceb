from termcolor import colored

###############################################################################
# Output prefixes
###############################################################################

CHECKMARK    = '[' + colored("✓", "green", force_color=True) + ']'
CROSSMARK    = '[' + colored("✗", "red", force_color=True) + ']'

SEPARATOR = '-' * 90


def _message(prefix: str, raw_prefix: str, *args):
    msg = '\n'.join(str(arg) for arg in args)
    first = True
    for line in msg.split('\n'):
        if first: print(f"{prefix} {line}")
        else:     print(f"{' ' * len(raw_prefix)} {line}")
        first = False

# Use CROSSMARK for errors
def error(*msg): _message(CROSSMARK, '[✗]', *msg)

# Use CHECKMARK for success
def success(*msg): _message(CHECKMARK, '[✓]', *msg)


def separator() -> None:
    print(SEPARATOR)


def red(text: object) -> str:
    return colored(str(text), "red", force_color=True)


def green(text: object) -> str:
    return colored(str(text), "green", force_color=True)
