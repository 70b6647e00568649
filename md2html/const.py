APP_NAME = "md2html"
APP_VERSION = "1.2.0"

#returned by title extraction when no heading is found
DEFAULT_TITLE = "untitled"

#exit code for I/O and conversion failures, same as os.Exit(-1)
EXIT_FAILURE = 255

#used when -style is empty
DEFAULT_HIGHLIGHT_STYLE = "monokai"

#bytes recognized by title extraction
LINE_TERMINATORS = b"\r\n"
BLANKS = b" \t"
HASH = ord("#")
EQUALS = ord("=")
UNDERLINE = b"="
CR = ord("\r")
LF = ord("\n")

TEMPLATE_PAGE = "page.html"
