# ==============================================================================
# DOCUMENTS
# ==============================================================================
# Accepted document extensions (matches the importer's file filter)
DOCUMENT_EXTENSIONS = (".arxml", ".xml", ".json")

# ==============================================================================
# IDENTITY RESOLUTION
# ==============================================================================
IDENTITY_TAGS = ("SHORT-NAME", "SHORT-LABEL")
MULTILINGUAL_TAG = "T"

# ==============================================================================
# NAMED HIERARCHY
# ==============================================================================
# Wrappers dropped with their whole subtree unless they carry an identity
NAMED_TREE_SKIP_TAGS = {"ANNOTATIONS", "#text"}

# ==============================================================================
# COMPONENT EXTRACTION
# ==============================================================================
# Structural noise with no standalone meaning
COMPONENT_SKIP_TAGS = {"#text", "S", "T"}

REFERENCE_SUFFIXES = ("-IREF", "-TREF", "-REF")

ASSEMBLY_CONNECTOR_TAG = "ASSEMBLY-SW-CONNECTOR"
PORT_PROTOTYPE_TAGS = {"P-PORT-PROTOTYPE", "R-PORT-PROTOTYPE"}
INTERFACE_REF_TAGS = ("REQUIRED-INTERFACE-TREF", "PROVIDED-INTERFACE-TREF")

CONNECTOR_ENDPOINTS = {
    "provider": {
        "iref": "PROVIDER-IREF",
        "component": "CONTEXT-COMPONENT-REF",
        "port": "TARGET-P-PORT-REF",
    },
    "requester": {
        "iref": "REQUESTER-IREF",
        "component": "CONTEXT-COMPONENT-REF",
        "port": "TARGET-R-PORT-REF",
    },
}

LOCATION_SEPARATOR = " > "

# ==============================================================================
# DISPLAY PROJECTION
# ==============================================================================
ROOT_KEY = "0"
KEY_SEPARATOR = "-"

# Consumed into the parent's label, never shown as nodes
BOOKKEEPING_TAGS = {"SHORT-NAME", "DESC", "S", "T"}

# Structural containers shown even when empty
ALWAYS_SHOW_TAGS = {
    "AUTOSAR",
    "AR-PACKAGES",
    "AR-PACKAGE",
    "ELEMENTS",
    "PORTS",
    "COMPONENTS",
    "CONNECTORS",
    "INTERNAL-BEHAVIORS",
    "RUNNABLES",
    "EVENTS",
}

# Root/annotation-only tags labelled with the bare tag even when named
TAG_ONLY_LABEL_TAGS = {"AUTOSAR", "AR-PACKAGES", "ANNOTATIONS", "ANNOTATION", "ADMIN-DATA"}

# Attributes that carry no browsing value
IGNORED_ATTRIBUTES = {"xmlns", "xsi:schemaLocation"}

# ==============================================================================
# ICON CATEGORIES
# ==============================================================================
DEFAULT_ICON = "file"

ICON_CATEGORIES = {
    "AUTOSAR": "document",
    "AR-PACKAGES": "package",
    "AR-PACKAGE": "package",
    "ELEMENTS": "block",
    "COMPONENTS": "block",
    "APPLICATION-SW-COMPONENT-TYPE": "component",
    "COMPOSITION-SW-COMPONENT-TYPE": "component",
    "SERVICE-SW-COMPONENT-TYPE": "component",
    "SW-COMPONENT-PROTOTYPE": "component",
    "SWC-IMPLEMENTATION": "component",
    "PORTS": "ports",
    "P-PORT-PROTOTYPE": "port",
    "R-PORT-PROTOTYPE": "port",
    "PR-PORT-PROTOTYPE": "port",
    "PROVIDED-INTERFACE-TREF": "interface",
    "REQUIRED-INTERFACE-TREF": "interface",
    "SENDER-RECEIVER-INTERFACE": "interface",
    "CLIENT-SERVER-INTERFACE": "interface",
    "ASSEMBLY-SW-CONNECTOR": "connector",
    "DELEGATION-SW-CONNECTOR": "connector",
    "INTERNAL-BEHAVIORS": "behavior",
    "SWC-INTERNAL-BEHAVIOR": "behavior",
    "EVENTS": "event",
    "TIMING-EVENT": "event",
    "RUNNABLES": "runnable",
    "RUNNABLE-ENTITY": "runnable",
}

# ==============================================================================
# SEARCH CATEGORIES
# ==============================================================================
# Checked in order, first matching pattern wins
CATEGORY_PATTERNS = [
    ("component", ("COMPONENT-TYPE", "SW-COMPONENT", "COMPOSITION")),
    ("behavior", ("BEHAVIOR", "RUNNABLE", "EVENT")),
    ("datatype", ("DATA-TYPE", "COMPU-METHOD", "DATA-CONSTR", "UNIT")),
    ("port", ("PORT",)),
]

CATEGORY_ALL = "all"
CATEGORY_OTHER = "other"
QUERY_CATEGORIES = ("all", "component", "port", "datatype", "behavior")

CATEGORY_LABELS = {
    "all": "All Elements",
    "component": "Software Components",
    "port": "Ports",
    "datatype": "Data Types",
    "behavior": "Behavior",
    "other": "Other",
}

# ==============================================================================
# QUERY ENGINE
# ==============================================================================
SEARCH_MODES = ("smart", "exact")
DEFAULT_SEARCH_MODE = "smart"
DEFAULT_PAGE_SIZE = 100
SEARCH_DEBOUNCE_SECONDS = 0.3
INDEX_CHUNK_SIZE = 5000

# ==============================================================================
# STATISTICS & DETAILS
# ==============================================================================
TYPE_FAMILIES = {
    "COMPONENT": "Component Types",
    "PORT": "Port Types",
    "CONNECTOR": "Connector Types",
    "PACKAGE": "Package Types",
    "COM-SPEC": "Communication",
}

REFERENCE_COUNT_BUCKETS = [
    ("0", 0, 0),
    ("1-10", 1, 10),
    ("11-100", 11, 100),
    ("101-1000", 101, 1000),
    ("1001+", 1001, None),
]

SNIPPET_MAX_LENGTH = 1000
LABEL_MAX_LENGTH = 50
