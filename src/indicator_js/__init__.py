"""Indicator formula to JavaScript translator."""

# Errors
from indicator_js.errors import ErrorCode as ErrorCode
from indicator_js.errors import FormulaSyntaxError as FormulaSyntaxError
from indicator_js.errors import LexicalError as LexicalError
from indicator_js.errors import TranslationError as TranslationError
from indicator_js.errors import UnexpectedEndError as UnexpectedEndError
from indicator_js.errors import UnexpectedTokenError as UnexpectedTokenError
from indicator_js.errors import UnsupportedFunctionError as UnsupportedFunctionError

# Function dispatch
from indicator_js.functions import FUNCTIONS as FUNCTIONS
from indicator_js.functions import CustomRule as CustomRule
from indicator_js.functions import FunctionRule as FunctionRule
from indicator_js.functions import Rename as Rename
from indicator_js.functions import build_function_table as build_function_table
from indicator_js.functions import function_rule as function_rule

# Nodes
from indicator_js.nodes import Array as Array
from indicator_js.nodes import Binary as Binary
from indicator_js.nodes import Call as Call
from indicator_js.nodes import FieldRef as FieldRef
from indicator_js.nodes import Group as Group
from indicator_js.nodes import Identifier as Identifier
from indicator_js.nodes import Literal as Literal
from indicator_js.nodes import Member as Member
from indicator_js.nodes import Node as Node
from indicator_js.nodes import Template as Template
from indicator_js.nodes import Unary as Unary
from indicator_js.nodes import emit as emit

# Parser
from indicator_js.parser import Parser as Parser
from indicator_js.parser import TokenStream as TokenStream

# Tokens
from indicator_js.tokens import Token as Token
from indicator_js.tokens import TokenType as TokenType
from indicator_js.tokens import tokenize as tokenize

# Translator
from indicator_js.translator import Translator as Translator
from indicator_js.translator import TranslatorConfig as TranslatorConfig
from indicator_js.translator import translate as translate
from indicator_js.version import __version__ as __version__
