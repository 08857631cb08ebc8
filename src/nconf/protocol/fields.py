"""Protocol constants.

Keep these in one place to avoid stringly-typed message handling.
"""

# End-of-message framing (NETCONF 1.0).
DELIMITER = b"]]>]]>"

FRAMING_1_0 = 0
# Chunked framing (NETCONF 1.1) is reserved, not implemented.
FRAMING_1_1 = 1

BASE_1_0 = "urn:ietf:params:netconf:base:1.0"
BASE_1_1 = "urn:ietf:params:netconf:base:1.1"

DEFAULT_CAPABILITIES = (BASE_1_0,)

# Element names
HELLO = "hello"
CAPABILITIES = "capabilities"
CAPABILITY = "capability"
SESSION_ID = "session-id"
RPC = "rpc"
RPC_REPLY = "rpc-reply"
RPC_ERROR = "rpc-error"
MESSAGE_ID = "message-id"
OK = "ok"

ERROR_TYPE = "error-type"
ERROR_TAG = "error-tag"
ERROR_SEVERITY = "error-severity"
ERROR_PATH = "error-path"
ERROR_MESSAGE = "error-message"

SEVERITY_ERROR = "error"

# Default datastore
RUNNING = "running"
