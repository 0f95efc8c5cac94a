#!/usr/bin/env python3
"""
Extension Organizer - Command Line Interface
Sorts the files of a directory into folders named after their extensions.
"""

from extension_organizer.organizer import main

if __name__ == "__main__":
    main()
