"""Helpers for bridging template values into embedded script literals."""

# Array conversion and joining
from rave.arrays import bump as bump
from rave.arrays import bump_join as bump_join
from rave.arrays import compact as compact
from rave.arrays import filter_map as filter_map
from rave.arrays import join_unique as join_unique
from rave.arrays import merge_all as merge_all
from rave.arrays import to_array as to_array

# Brackets
from rave.brackets import mirror as mirror

# Classification
from rave.classify import can_split as can_split
from rave.classify import humanize as humanize
from rave.classify import is_dust as is_dust
from rave.classify import is_human as is_human
from rave.classify import is_literal as is_literal
from rave.classify import is_void as is_void

# Data to script
from rave.convert import data_to_js as data_to_js
from rave.convert import data_to_json as data_to_json
from rave.convert import each_to_js as each_to_js

# Errors
from rave.errors import RaveWarning as RaveWarning

# Identifiers
from rave.ident import is_valid_id as is_valid_id
from rave.ident import is_valid_var_name as is_valid_var_name
from rave.ident import to_var_name as to_var_name

# Value kinds
from rave.kinds import Kind as Kind
from rave.kinds import is_numeric as is_numeric
from rave.kinds import kind_of as kind_of
from rave.kinds import to_text as to_text
from rave.literals import LiteralKind as LiteralKind
from rave.literals import classify_literal as classify_literal
from rave.literals import strip_literal_quotes as strip_literal_quotes

# Padding and quoting
from rave.pad import affix as affix
from rave.pad import pad as pad
from rave.pad import quote as quote
from rave.pad import unquote as unquote

# Text formatting
from rave.reformat import sanitize as sanitize
from rave.reformat import unfold_code as unfold_code
from rave.reformat import wrap_cdata as wrap_cdata
from rave.version import __version__ as __version__
