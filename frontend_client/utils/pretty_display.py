# pretty print display stuff
RED = '\033[31m'
GREEN = '\033[32m'
CYAN = '\033[36m'
YELLOW = '\033[33m'
BOLD = '\033[1m'
RESET = '\033[0m'

FIELD_LABELS = {
    'name': 'Name',
    'attribute': 'Attribute',
    'race': 'Race',
    'level': 'Level',
    'atk': 'ATK',
    'def': 'DEF',
}


def print_info(message: str):
    print(f"[INFO]: {message}")


def print_error(message: str):
    print(f"{RED}[ERROR]: {message}{RESET}")


def print_border():
    print("=" * 40)
    print()


def print_startup_message():
    print_border()
    print("Welcome to Monster Guess!")
    print("Guess the hidden monster card by name.")
    print("Choose a difficulty to start:")
    print("1. Easy")
    print("2. Medium")
    print("3. Hard")
    print_border()


def format_field(field: dict) -> str:
    label = FIELD_LABELS.get(field['field'], field['field'])
    if field['exact']:
        return f"{GREEN}{label}: {field['guessed']} ✔{RESET}"
    if not field.get('comparable', True):
        return f"{YELLOW}{label}: {field['guessed']} (diff: ?){RESET}"
    if field.get('distance') is None:
        return f"{label}: {field['guessed']}"
    return f"{label}: {field['guessed']} (diff: {field['distance']})"


def print_comparison(result: dict):
    print_border()
    for field in result['fields']:
        print(f"  {format_field(field)}")
    print_border()


def print_reference_lists(attributes: list, races: list):
    print(f"{CYAN}Attributes:{RESET} {' '.join(attributes)}")
    print(f"{CYAN}Races:{RESET} {' '.join(races)}")


def print_win(answer: dict):
    print(f"{BOLD}{GREEN}Congratulations, you got it!{RESET}")
    print(f"The answer was: {answer['name']}")
    print(f"Description: {answer['desc']}")
