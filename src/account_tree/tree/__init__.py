"""Tree node types.

``AccountTreeRoot`` lives in ``account_tree.tree.account_root`` and is not
re-exported here because the services it composes import these base classes.
"""
