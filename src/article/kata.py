"""The closing exercise of the article."""

KATA_STEPS = (
    "Look through a codebase you work on and find one place where each of "
    "Humble Object, Factory, Object Parent and Composite is already used, "
    "even if nobody called it that.",
    "Pick one piece of code that is hard to test and refactor it using one "
    "of these patterns, then write the test that was hard to write before.",
)
