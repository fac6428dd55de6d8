# ==========================================
# 1. AWS IoT Device Shadow
# ==========================================
AWS_REGION = "us-east-1"
IOT_DATA_ENDPOINT = "https://axl7m09zqye1i-ats.iot.us-east-1.amazonaws.com"
THING_NAME = "HornoConeccionAWS"

# ==========================================
# 2. Event Store (Supabase / PostgREST)
# ==========================================
DEFAULT_EVENT_TABLE = "eventos_industriales"
REST_PATH_PREFIX = "/rest/v1"
DEFAULT_STORE_TIMEOUT_SECONDS = 10

RECORD_TYPE_READING = "lectura"
RECORD_TYPE_EVENT = "evento"

MODE_AUTOMATIC = "automático"
MODE_MANUAL = "manual"

# ==========================================
# 3. PLC Signals
# ==========================================
# Raw codes the PLC reports for digital points
RAW_OFF = "00"
RAW_ON = "01"

# Mode-select (automatic) flags
SIGNAL_AUTO_VULCANIZER = "M..1:22-1"
SIGNAL_AUTO_CENTRIFUGE = "M..1:23-1"

# Outputs
SIGNAL_PISTON = "Q..1:10-1"
SIGNAL_CENTRIFUGE_MOTOR = "Q..1:8-1"
SIGNAL_HEATERS = "Q..1:9-1"
SIGNAL_VULCANIZER_MOTOR = "Q..1:12-1"

# Inputs
SIGNAL_EMERGENCY = "I..1:5-1"

# Analog inputs
SIGNAL_VULCANIZER_PRESSURE = "AI..4:3-1"
SIGNAL_VULCANIZER_TEMPERATURE = "AI..4:1-1"

# Machines as they appear in the event log
MACHINE_VULCANIZER = "Vulcanizadora"
MACHINE_CENTRIFUGE = "Horno centrifugo"

# ==========================================
# 4. HTTP
# ==========================================
CORS_HEADERS = {"Access-Control-Allow-Origin": "*"}

ROUTE_SHADOW = "/shadow"
ROUTE_PROCESS = "/procesar"
