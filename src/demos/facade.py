"""Facade: one simple entry point to a complex subsystem."""


class CPU:
    def freeze(self) -> None:
        print("  CPU: Freeze")

    def jump(self, position: int) -> None:
        print(f"  CPU: Jump to {position}")

    def execute(self) -> None:
        print("  CPU: Execute")


class Memory:
    def load(self, position: int, data: bytes) -> None:
        print(f"  Memory: Load at {position}")


class HardDrive:
    def read(self, lba: int, size: int) -> bytes:
        print(f"  HardDrive: Read {size} bytes")
        return bytes(size)


def before() -> None:
    print("FacadeBefore:")
    # Client has to know the boot sequence
    cpu = CPU()
    memory = Memory()
    hard_drive = HardDrive()

    cpu.freeze()
    memory.load(0, hard_drive.read(0, 1024))
    cpu.jump(0)
    cpu.execute()


class ComputerFacade:
    def __init__(self):
        self._cpu = CPU()
        self._memory = Memory()
        self._hard_drive = HardDrive()

    def start(self) -> None:
        self._cpu.freeze()
        self._memory.load(0, self._hard_drive.read(0, 1024))
        self._cpu.jump(0)
        self._cpu.execute()


def after() -> None:
    print("FacadeAfter:")
    ComputerFacade().start()
