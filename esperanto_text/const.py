# Direction tokens accepted by convert() and the command line
DIRECTION_UTF8 = "u"
DIRECTION_X_SYSTEM = "x"
DIRECTION_H_SYSTEM = "h"

DIRECTIONS: list[str] = [
    DIRECTION_UTF8,
    DIRECTION_X_SYSTEM,
    DIRECTION_H_SYSTEM,
]

DIRECTION_NAMES: dict[str, str] = {
    DIRECTION_UTF8: "UTF-8 input (with diacritics)",
    DIRECTION_X_SYSTEM: "x-system input",
    DIRECTION_H_SYSTEM: "h-system input",
}

# Suffixes marking a diacritic in the ASCII transliterations
X_SYSTEM_SUFFIX = "x"
H_SYSTEM_SUFFIX = "h"

# Trigger for "aŭ" in h-system text, where ŭ is written as a bare "u"
H_SYSTEM_AU_TRIGGER = "au"

# Command line
CLI_PROG = "eotext"
CLI_EXAMPLE = 'x u "sxangxo"'
EXIT_USAGE = 1
