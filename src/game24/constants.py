TARGET = 24
TOLERANCE = 1e-10          # |value - target| below this counts as a hit
NUM_OPERANDS = 4

OPERATORS = ('+', '-', '*', '/')
PRECEDENCE = {'+': 1, '-': 1, '*': 2, '/': 2}
COMMUTATIVE = {'+', '*'}
NON_COMMUTATIVE = {'-', '/'}

# card faces the game accepts in typed answers
CARD_VALUES = {'A': 1, 'J': 11, 'Q': 12, 'K': 13}
CARD_RANGE = (1, 13)
ANSWER_DIGITS = 6          # typed answers are rounded before comparing

