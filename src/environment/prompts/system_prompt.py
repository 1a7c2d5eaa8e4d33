SYSTEM_PROMPT = """You are solving a word-search puzzle. A square grid of letters hides a list of target words.

## Rules
1. Every target word is written in a straight line, in one of three directions:
   - left-to-right (along a row)
   - top-to-bottom (along a column)
   - diagonally from top-left to bottom-right
2. Words may cross each other where they share a letter
3. All other cells are random filler letters
4. Each turn you select ONE word by listing its cells in order
5. A selection read backwards also counts
6. Selecting a word you already found does nothing

## Coordinates
Cells are written as `row,col`, both 0-indexed. Row 0 is the top row,
column 0 is the leftmost column. The grid is shown with row numbers on the
left and column numbers on top.

## Response Format
Always respond with these tags:

<reasoning>
Where you found the word and how you checked it, letter by letter
</reasoning>

<selection>r,c r,c r,c ...</selection>

Example: if the word SOL runs along row 2 starting at column 4:
<selection>2,4 2,5 2,6</selection>

# GOAL
Find all the target words in as few turns as possible.
"""


def get_system_prompt() -> str:
    """Return the system prompt."""
    return SYSTEM_PROMPT
