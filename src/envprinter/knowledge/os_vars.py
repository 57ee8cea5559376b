"""Catalog of environment variables injected by the OS, shell or desktop.

Entries ending in ``_`` are prefixes; all others match exactly.
"""

PREFIX_MARKER = "_"

WINDOWS_VARS = (
    "ALLUSERSPROFILE",
    "APPDATA",
    "COMMONPROGRAMFILES",
    "COMMONPROGRAMFILES(X86)",
    "COMMONPROGRAMW6432",
    "COMPUTERNAME",
    "COMSPEC",
    "DRIVERDATA",
    "HOMEDRIVE",
    "HOMEPATH",
    "LOCALAPPDATA",
    "LOGONSERVER",
    "NUMBER_OF_PROCESSORS",
    "ONEDRIVE",
    "OS",
    "PATHEXT",
    "PROCESSOR_",
    "PROGRAMDATA",
    "PROGRAMFILES",
    "PROGRAMFILES(X86)",
    "PROGRAMW6432",
    "PSMODULEPATH",
    "PUBLIC",
    "SESSIONNAME",
    "SYSTEMDRIVE",
    "SYSTEMROOT",
    "TEMP",
    "TMP",
    "USERDOMAIN",
    "USERDOMAIN_ROAMINGPROFILE",
    "USERNAME",
    "USERPROFILE",
    "WINDIR",
)

UNIX_SESSION_VARS = (
    "HOME",
    "HOSTNAME",
    "HOSTTYPE",
    "LOGNAME",
    "MACHTYPE",
    "MAIL",
    "OLDPWD",
    "OSTYPE",
    "PATH",
    "PWD",
    "SHELL",
    "SHLVL",
    "TMPDIR",
    "USER",
    "DBUS_SESSION_BUS_ADDRESS",
    "DESKTOP_SESSION",
    "DISPLAY",
    "SESSION_MANAGER",
    "WAYLAND_DISPLAY",
    "XAUTHORITY",
    "XDG_",
    "SSH_",
    "GPG_AGENT_INFO",
    "SECURITYSESSIONID",
    "COMMAND_MODE",
    "__CF_",
)

SHELL_VARS = (
    "COLORTERM",
    "COLUMNS",
    "EDITOR",
    "HISTCONTROL",
    "HISTFILESIZE",
    "HISTSIZE",
    "LESS",
    "LESSCLOSE",
    "LESSOPEN",
    "LINES",
    "LS_COLORS",
    "PAGER",
    "PS1",
    "PS2",
    "TERM",
    "TERM_PROGRAM",
    "TERM_PROGRAM_VERSION",
    "TERM_SESSION_ID",
    "VISUAL",
    "WINDOWID",
)

LOCALE_VARS = (
    "LANG",
    "LANGUAGE",
    "LC_",
    "TZ",
)


def get_os_exclusion_catalog() -> tuple[str, ...]:
    """Get every built-in exclusion entry.

    Returns:
        Exact names and prefix markers, in catalog order
    """
    return WINDOWS_VARS + UNIX_SESSION_VARS + SHELL_VARS + LOCALE_VARS
