"""Installer items and states, the keyboard-driven state machine, and its text rendering."""