"""Console prompts for the reconfiguration flow"""

# Typed on its own, clears the field instead of keeping the shown value
CLEAR_ANSWER = "-"


class ConsolePrompter:
    def __init__(self, input_func=None):
        self._input = input_func or input

    def prompt(self, message, default=""):
        """
        Ask for a value. Returns None when the user cancels (EOF / Ctrl+D).
        An empty answer keeps the default; CLEAR_ANSWER returns "".
        """
        suffix = f" [{default}]" if default else ""
        try:
            answer = self._input(f"{message}{suffix}: ")
        except EOFError:
            print()
            return None
        if answer.strip() == CLEAR_ANSWER:
            return ""
        return answer if answer.strip() else default

    def confirm(self, message):
        try:
            answer = self._input(f"{message} (Y/N): ")
        except EOFError:
            print()
            return False
        return answer.strip().upper() in ["Y", "YES"]
