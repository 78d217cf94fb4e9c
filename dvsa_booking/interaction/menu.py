"""Named actions exposed to the user"""


class CommandMenu:
    """Registry of named actions, the CLI's equivalent of a userscript menu"""

    def __init__(self):
        self._actions = {}

    def register(self, name, action):
        if name in self._actions:
            raise ValueError(f"Menu command already registered: {name}")
        self._actions[name] = action

    def names(self):
        return list(self._actions)

    def run(self, name):
        try:
            action = self._actions[name]
        except KeyError:
            raise KeyError(f"No menu command named {name!r}") from None
        return action()
