r"""
'                       __    _
'   _________  ____ ___ / /_  (_)___  ____ _
'  / ___/ __ \/ __ `__ \/ __ \/ / __ \/ __ `/
' / /__/ /_/ / / / / / / /_/ / / / / / /_/ /
' \___/\____/_/ /_/ /_/_.___/_/_/ /_/\__, /
'                                      /_/
"""

# expose the generators
from .extensions.combinations import Combinations
from .extensions.combinations_with_replacement import CombinationsWithReplacement
from .extensions.permutations import Permutations

# expose the factory functions
from .factories import (
    from_sequence,
    combinations,
    combinations_with_replacement,
    permutations,
    C,
    cwr
)

# expose counting and projection
from .cardinality import (
    factorial,
    choose,
    permute,
    multichoose,
    combination_appearances,
    permutation_appearances,
    multichoose_appearances
)
from .projection import fill_buffer

# expose supporting types and errors
from .source import Source
from .types import CombinationLike, GeneratorState, SequenceView
from .errors import ConstructionError, ContractViolationError

# define what `import *` does
__all__ = [
    "Combinations",
    "CombinationsWithReplacement",
    "Permutations",
    "from_sequence",
    "combinations",
    "combinations_with_replacement",
    "permutations",
    "C",
    "cwr",
    "factorial",
    "choose",
    "permute",
    "multichoose",
    "combination_appearances",
    "permutation_appearances",
    "multichoose_appearances",
    "fill_buffer",
    "Source",
    "CombinationLike",
    "GeneratorState",
    "SequenceView",
    "ConstructionError",
    "ContractViolationError"
]
