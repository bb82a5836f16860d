import os

# Project root directory (used for resource paths)
PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

# User settings file (JSON). Relative paths inside it resolve against its directory.
CONFIG_PATH = os.getenv(
    'SFX_CONFIG_PATH',
    os.path.join(os.path.expanduser('~'), '.config', 'opencode', 'opencode-sfx.json'),
)

# Sound asset tree
DEFAULT_SOUND_ROOT = os.getenv(
    'SFX_SOUND_ROOT',
    os.path.join(os.path.expanduser('~'), '.config', 'opencode', 'sounds'),
)
BUNDLED_SOUNDS_ROOT = os.getenv('SFX_BUNDLED_SOUNDS', f'{PROJECT_ROOT}/resources/sounds')
SUPPORTED_EXTENSIONS = ('.ogg', '.wav', '.mp3')

# Player probing
PLAYER_PROBE_TIMEOUT = float(os.getenv('SFX_PLAYER_PROBE_TIMEOUT', '2.0'))  # seconds per `which` call
FFPLAY_ARGS = ['-loglevel', 'quiet', '-nodisp', '-autoexit']

# Host event bridge
PROMPT_SUBMIT_COMMAND = 'prompt.submit'
IDLE_STATUS = 'idle'

# Event bus
EVENT_BUS_MAX_QUEUE = int(os.getenv('SFX_EVENT_BUS_MAX_QUEUE', '1000'))
EVENT_BUS_DROP_POLICY = os.getenv('SFX_EVENT_BUS_DROP_POLICY', 'drop_new')  # drop_new, drop_oldest
EVENT_BUS_ENFORCE_WHITELIST = os.getenv('SFX_EVENT_BUS_ENFORCE_WHITELIST', 'true').lower() == 'true'

# Logging
# Hook-style hosts read stdout, so default to stderr.
LOG_OUTPUTS = os.getenv('SFX_LOG_OUTPUTS', 'stderr')  # comma-separated: stdout, stderr, file
LOG_FILE_PATH = os.getenv('SFX_LOG_FILE', os.path.join(os.path.expanduser('~'), '.cache', 'opencode-sfx', 'sfx.log'))
DEBUG_LOG_OUTPUTS = os.getenv('SFX_DEBUG_LOG_OUTPUTS', LOG_OUTPUTS)
DEBUG_LOG_FILE_PATH = os.getenv('SFX_DEBUG_LOG_FILE', LOG_FILE_PATH)
DEBUG = os.getenv('SFX_DEBUG', 'false').lower() == 'true'

# Default tone generation (scripts/generate_default_sounds.py)
TONE_SAMPLE_RATE = 22050
