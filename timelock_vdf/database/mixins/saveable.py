from ..database import save_instance


class Saveable:
    def save(self) -> None:
        """
        Save the instance to the database.

        Loaded attributes stay readable after the session closes.
        """
        save_instance(self)
