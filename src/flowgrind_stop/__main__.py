from .launch import console_entry_point

console_entry_point()
