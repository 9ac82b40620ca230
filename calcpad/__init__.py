"""calcpad: an immediate-execution keypad calculator.

Digits, operators, equals, clear, backspace, sign toggle and percent drive
a single CalculatorState. Operations are settled strictly left to right as
each operator is pressed, and the last five results are kept as history.

Usage:
    python -m calcpad keys                     # Show key bindings
    python -m calcpad press 7 + 3 =            # Replay keys
    python -m calcpad repl                     # Interactive keypad
"""
