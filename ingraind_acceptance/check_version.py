# ingraind_acceptance/check_version.py
# Check version constants. Single authoritative definition.
# Referenced by result_recorder.py and ci_gate.py for version stamping.
# A change to the expected catalog or to the result record layout requires
# a version increment here.

CHECK_VERSION: str = "1.0.0"

# Layout version of the JSON run records written by ResultRecorder.
RESULT_FORMAT_VERSION: str = "1.0.0"
