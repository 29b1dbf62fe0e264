from dataclasses import dataclass


@dataclass(frozen=True)
class Employee:
    """
    Employee directory entry.
    Seeded once at startup; the name is the lookup key for meeting check-ins.
    """
    id: int
    name: str
    email: str

    def __repr__(self):
        return f"<Employee(id={self.id}, name='{self.name}', email='{self.email}')>"
