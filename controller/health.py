from schema import HealthOut


class HealthOp:
    def __init__(self, store):
        self.store = store

    def health(self) -> HealthOut:
        return HealthOut(dbState=self.store.connection_state())
