VERSION = (0, 1, 0)
VERSION_STR = f"{VERSION[0]}.{VERSION[1]}.{VERSION[2]}{'-' +  str(VERSION[-1]) if len(VERSION) > 3 else ''}"


ARGV0 = "minargs"
DESCRIPTION = "An ultra simple command-line arguments parser"

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_UNUSED_ARGS = 2
