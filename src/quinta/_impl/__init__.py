from .errors import *  # noqa: F401, F403
from .pitch import *  # noqa: F401, F403
from .notation import *  # noqa: F401, F403
from .parsing import *  # noqa: F401, F403
from .render import *  # noqa: F401, F403
from .properties import *  # noqa: F401, F403
from .transpose import *  # noqa: F401, F403
from .midi import *  # noqa: F401, F403
from .lists import *  # noqa: F401, F403
