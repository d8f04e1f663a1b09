"""Feature flags for switching between native and fallback text paths.

Centralized so tests can toggle behavior deterministically without
sprinkling ad-hoc environment variable reads in hot code paths.

Flags are simple module-level booleans read at call time, so a test can
patch them for the duration of a single call.
"""

import os

# Use Python's str for length/substr/case folding/UTF-16. When False, the
# byte-level regex and lookup-table fallbacks are used instead.
NATIVE_MULTIBYTE = os.environ.get("TURBOTEXT_NO_NATIVE", "0") != "1"
