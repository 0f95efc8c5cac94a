# Extension classification - maps a file name to its destination folder key

NO_EXTENSION_FOLDER = "no_extension"
HIDDEN_FILE_PREFIX = "."
EXTENSION_SEPARATOR = "."


def classify(name: str) -> str:
    """
    Extract the normalized extension of a file name

    The extension is the lower-cased text after the last dot. Names without
    a dot, dotfiles and names ending in a dot have no extension.

    Args:
        name: Bare file name (no directory part)

    Returns:
        Extension without the dot, or an empty string
    """
    last_dot = name.rfind(EXTENSION_SEPARATOR)
    if last_dot <= 0 or name.startswith(HIDDEN_FILE_PREFIX):
        return ""
    return name[last_dot + 1:].lower()


def folder_name_for(extension: str) -> str:
    """Folder key for an extension, falling back to the no-extension folder"""
    return extension if extension else NO_EXTENSION_FOLDER


def get_folder_name(name: str) -> str:
    """Folder key a file with this name is organized into"""
    return folder_name_for(classify(name))


def is_hidden(name: str) -> bool:
    return name.startswith(HIDDEN_FILE_PREFIX)
