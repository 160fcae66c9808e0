"""Built-in common validation rules.

Every public module here is loaded by path at validation time; subfolders are
named after the platform they apply to and load only when it is requested.
"""
