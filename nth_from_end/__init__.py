from .defs import *
from .schema_defs import *
from .linked_list import *
from .remove_nth import *
