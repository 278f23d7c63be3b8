"""tenor.bean — self-describing immutable value types.

Metadata, builders, generic property access and structural
equality/hash/rendering shared by every value type in tenor.
"""

from tenor.bean.bean import ImmutableBean as ImmutableBean
from tenor.bean.bean import bean_equals as bean_equals
from tenor.bean.bean import bean_hash as bean_hash
from tenor.bean.bean import bean_to_string as bean_to_string
from tenor.bean.builder import BeanBuilder as BeanBuilder
from tenor.bean.convert import StringConverter as StringConverter
from tenor.bean.convert import find_converter as find_converter
from tenor.bean.convert import register_converter as register_converter
from tenor.bean.meta import MetaBean as MetaBean
from tenor.bean.meta import lookup_meta_bean as lookup_meta_bean
from tenor.bean.meta import meta_bean as meta_bean
from tenor.bean.meta import registered_beans as registered_beans
from tenor.bean.property import MetaProperty as MetaProperty
