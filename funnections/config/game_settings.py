"""
Game Configuration Constants Module

Rules of the puzzle (group shape, mistake budget, player-facing messages)
and loading of the puzzle answer key from JSON.
"""

import json
import os
from typing import Dict, List, Final, Optional

GROUP_COUNT: Final[int] = 4
GROUP_SIZE: Final[int] = 4

MISTAKE_BUDGET: Final[int] = 4
"""
Number of incorrect submissions allowed before the game is lost.
Type: Final[int] - Immutable to prevent accidental modification
"""

# Player-facing messages
MSG_START: Final[str] = "Create four groups of four!"
MSG_WRONG_SIZE: Final[str] = "Please select exactly 4 tiles."
MSG_CORRECT: Final[str] = "Correct group!"
MSG_WIN: Final[str] = "You win! All groups found!"
MSG_INCORRECT: Final[str] = "Incorrect group. Try again."
MSG_GAME_OVER: Final[str] = "Game over! No more mistakes allowed."

DEFAULT_PUZZLE_FILE: Final[str] = os.path.join(
    os.path.dirname(os.path.abspath(__file__)), 'puzzle.json'
)


def load_puzzle(path: Optional[str] = None) -> List[List[str]]:
    """
    Load the puzzle answer key from a JSON file.

    The file holds an object with a ``groups`` array of four arrays of four words.

    Args:
        path: Puzzle file to read, defaults to the bundled puzzle.json

    Returns:
        List[List[str]]: The four groups, words as written in the file

    Raises:
        FileNotFoundError: If the puzzle file is not found
        ValueError: If the JSON is malformed or the puzzle shape is invalid
    """
    json_file_path = path or DEFAULT_PUZZLE_FILE

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Puzzle file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_file_path}: {e}")

    if not isinstance(data, dict) or not isinstance(data.get('groups'), list):
        raise ValueError("Puzzle file must contain an object with a 'groups' array")

    groups = []
    for index, group in enumerate(data['groups']):
        if not isinstance(group, list):
            raise ValueError(f"Group {index} must be an array of words")
        for word in group:
            if not isinstance(word, str):
                raise ValueError(f"Group {index} contains a non-string word: {word!r}")
        groups.append([word.strip() for word in group])

    validate_puzzle_integrity(groups)
    return groups


def validate_puzzle_integrity(groups: List[List[str]]) -> bool:
    """
    Validates the shape and consistency of a puzzle answer key.

    This function checks:
    1. Group count: exactly GROUP_COUNT groups
    2. Group size: every group has exactly GROUP_SIZE words
    3. Word format: no empty words
    4. Partition: no word appears twice, case-insensitively

    Returns:
        bool: True if the puzzle passes all checks

    Raises:
        ValueError: If any check fails with a detailed error message
    """
    if len(groups) != GROUP_COUNT:
        raise ValueError(f"Puzzle must have {GROUP_COUNT} groups, got {len(groups)}")

    for index, group in enumerate(groups):
        if len(group) != GROUP_SIZE:
            raise ValueError(f"Group {index} must have {GROUP_SIZE} words, got {len(group)}")
        for word in group:
            if not word:
                raise ValueError(f"Group {index} contains an empty word")

    folded = [word.casefold() for group in groups for word in group]
    if len(folded) != len(set(folded)):
        duplicates = sorted({word for word in folded if folded.count(word) > 1})
        raise ValueError(f"Duplicate words found in puzzle: {duplicates}")

    return True


def get_puzzle_statistics(groups: List[List[str]]) -> Dict:
    """Summary of a puzzle, used by the health endpoint and startup log."""
    words = [word for group in groups for word in group]
    if not words:
        return {"error": "Puzzle is empty"}

    return {
        "group_count": len(groups),
        "total_words": len(words),
        "avg_word_length": round(sum(len(word) for word in words) / len(words), 2),
        "longest_word": max(words, key=len)
    }


# Answer key loaded from the bundled puzzle file
PUZZLE_GROUPS: Final[List[List[str]]] = load_puzzle()


if __name__ == "__main__":

    try:
        validate_puzzle_integrity(PUZZLE_GROUPS)
        print(" Puzzle validation passed")

        stats = get_puzzle_statistics(PUZZLE_GROUPS)
        print(f" Puzzle statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
