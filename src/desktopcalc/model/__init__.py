"""
The MODEL layer contains the calculator's pure state and arithmetic.
It has NO knowledge of the GUI (Qt).
It deals with operand entry, operators and evaluation.
"""
