from typing import Dict, List


def render_letters(letters: List[str]) -> str:
    """Render the scrambled letters as a row of uppercase tiles."""
    return ' '.join(f"[{letter.upper()}]" for letter in letters)


def render_used_words(used_words: List[str], root_word: str) -> str:
    """Render accepted words, newest first, each with its length badge."""
    lines = []
    for word in used_words:
        marker = ' *' if word == root_word else ''
        lines.append(f"({len(word)}) {word}{marker}")
    return '\n'.join(lines)


def render_state(state: Dict) -> str:
    """Render a whole round from a state dictionary (see RoundState.get_state)."""
    lines = [
        f"Score: {state['score']}",
        "",
        render_letters(state['letters']),
    ]

    used = render_used_words(state['used_words'], state['root_word'])
    if used:
        lines.append("")
        lines.append(used)

    return '\n'.join(lines)


def render_alert(title: str, message: str) -> str:
    """Render a title/message pair the way the round shows its alerts."""
    width = max(len(title), len(message))
    rule = '-' * width
    return '\n'.join([rule, title, message, rule])


if __name__ == '__main__':
    example = {
        "root_word": "silkworm",
        "letters": list("mowlsrik"),
        "used_words": ["silkworm", "silk", "worm"],
        "score": 2800,
    }

    print(render_state(example))
    print()
    print(render_alert("CONGRATULATION!", "You found the key word!"))
