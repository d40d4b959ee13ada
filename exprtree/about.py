__title__ = "exprtree"
__version__ = "0.1.0"
__summary__ = "Arithmetic expression trees with bounded, fully parenthesized rendering"
__author__ = "exprtree contributors"
__license__ = "MIT"
