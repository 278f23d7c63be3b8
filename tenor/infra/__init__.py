"""tenor.infra — configuration."""

from tenor.infra.config import DEFAULT_EXPANSION as DEFAULT_EXPANSION
from tenor.infra.config import DEFAULT_RENDERING as DEFAULT_RENDERING
from tenor.infra.config import BeanRenderingConfig as BeanRenderingConfig
from tenor.infra.config import ExpansionConfig as ExpansionConfig
