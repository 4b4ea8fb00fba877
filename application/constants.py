"""Wire-level names shared by the request builder, client and services."""

# Common meme parameters
OPCO = "opco"
NAME = "name"
SLUG = "slug"
PID = "pid"
EXTERNAL = "external"
LANG = "lang"
VERSION = "v"

# Relation parameters
PROPERTY = "property"
OPTION = "option"
SUBOPTION = "suboption"
PARENT = "parent"
CHILD = "child"
MAP_FROM = "from"
MAP_TO = "to"
MAP_TO_OPCO = "to_opco"
DIRECTION = "dir"

# Paging
START = "from"
MAX = "max"

# Accounts
LOGIN = "login"
PASSWORD = "password"
CONFIRMATION = "confirmation"
ORIGINAL_PASSWORD = "original"
USER_CREDENTIALS = "user_credentials"

# Never written to logs
SECRET_PARAMS = frozenset({USER_CREDENTIALS, PASSWORD, CONFIRMATION, ORIGINAL_PASSWORD})

# Utility resources
SESSION_RESOURCE = "user_session"
SEARCH_RESOURCE = "search"
FUNCTION_RESOURCE = "function"
SLUG_RESOURCE = "slug"
UUID_RESOURCE = "uuid"
TEST_RESET_RESOURCE = "test/reset"

# Meme fields a caller may ask update() to clear -> wire parameter
CLEARABLE_FIELDS = {
    "name": NAME,
    "external": EXTERNAL,
    "language": LANG,
}
