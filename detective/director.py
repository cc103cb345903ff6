from detective.ledger import ClueLedger

AT_ROOM = "AT_ROOM"
TERMINATED = "TERMINATED"

DIRECTIONS = {
    'e': "left",
    'd': "right",
}


class Director:
    def __init__(self, mansion, clue_catalog, ledger=None):
        """
        The Director is the STATE MACHINE.
        It does not print text. It moves the detective, fills the ledger and reports events.
        """
        self.mansion = mansion
        self.catalog = clue_catalog
        self.ledger = ledger if ledger is not None else ClueLedger()
        self.current_room = mansion.root
        self.state = AT_ROOM

    @property
    def terminated(self):
        return self.state == TERMINATED

    # ==========================================================
    # 1. ROOM ENTRY (Clue collection)
    # ==========================================================
    def visit(self):
        """
        Entering the current room. Collects its clue if the ledger lacks it.
        Returns: [room_entered, clue_collected | clue_already_collected | no_clue]
        """
        room = self.current_room
        results = [self._event("room_entered", room=room.name)]

        clue = self.catalog.lookup_room_clue(room.name)
        if clue is None:
            results.append(self._event("no_clue", room=room.name))
        elif self.ledger.add(clue):
            results.append(self._event("clue_collected", room=room.name, clue=clue, total=len(self.ledger)))
        else:
            results.append(self._event("clue_already_collected", room=room.name, clue=clue, total=len(self.ledger)))
        return results

    # ==========================================================
    # 2. THE COMMAND ROUTER (Movement & stop)
    # ==========================================================
    def execute(self, command):
        """
        Master Router: one command character (None = input closed) -> list of events.
        """
        if self.terminated:
            return [self._event("error", reason="exploration_over")]

        if command is None:
            return self._terminate("end_of_input")
        if command == 's':
            return self._terminate("stop")
        if command in DIRECTIONS:
            return self.move(DIRECTIONS[command])
        return [self._event("invalid_command", command=command)]

    def move(self, direction):
        room = self.current_room
        target = room.left if direction == "left" else room.right

        if target is None:
            return [self._event("no_exit", room=room.name, direction=direction)]

        self.current_room = target
        return [self._event("moved", direction=direction, origin=room.name, room=target.name)]

    # ==========================================================
    # 3. THE LOOP
    # ==========================================================
    def run(self, listener, narrator):
        """
        Drives exploration until the player stops or input runs out.
        Returns the ledger so the verdict phase can take it over.
        """
        narrator.render([self._event("exploration_started", room=self.current_room.name)])
        while not self.terminated:
            narrator.render(self.visit())
            narrator.prompt_moves(self.current_room)
            narrator.render(self.execute(listener.listen()))
        return self.ledger

    # ==========================================================
    # 4. INTERNAL HELPERS
    # ==========================================================
    def _terminate(self, reason):
        self.state = TERMINATED
        return [self._event("exploration_ended", reason=reason, room=self.current_room.name, total=len(self.ledger))]

    def _event(self, event_type, **data):
        return {"event_type": event_type, "data": data}
