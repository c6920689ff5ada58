"""D-Bus constants for the scx loader service."""

# D-Bus service identification
SERVICE_NAME = "org.scx.Loader"
OBJECT_PATH = "/org/scx/Loader"
INTERFACE_NAME = "org.scx.Loader"

# Read-only properties
PROP_CURRENT_SCHEDULER = "CurrentScheduler"
PROP_SCHEDULER_MODE = "SchedulerMode"
PROP_SUPPORTED_SCHEDULERS = "SupportedSchedulers"

# Methods and their D-Bus signatures
METHOD_START = "StartScheduler"
METHOD_START_WITH_ARGS = "StartSchedulerWithArgs"
METHOD_SWITCH = "SwitchScheduler"
METHOD_SWITCH_WITH_ARGS = "SwitchSchedulerWithArgs"
METHOD_STOP = "StopScheduler"

SIG_NAME_MODE = "su"
SIG_NAME_ARGS = "sas"

# Fixed deadline for every remote call, in seconds
CALL_TIMEOUT_S = 5.0
