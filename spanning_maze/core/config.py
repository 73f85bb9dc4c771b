from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

SOLVERS = ("bfs", "dfs")


@dataclass
class MazeConfig:
    rows: int = 20
    cols: int = 20
    seed: Optional[int] = None
    solver: Optional[str] = None
    max_iterations: Optional[int] = None

    @classmethod
    def from_args(cls, args) -> "MazeConfig":
        config = cls(
            rows=args.rows,
            cols=args.cols,
            seed=args.seed,
            solver=args.solve,
            max_iterations=args.max_iterations,
        )
        config.validate()
        return config

    def validate(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Grid dimensions must be positive integers, got {self.rows}x{self.cols}")
        if self.solver is not None and self.solver not in SOLVERS:
            raise ValueError(f"Unknown solver '{self.solver}', expected one of {', '.join(SOLVERS)}")
        if self.max_iterations is not None and self.max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {self.max_iterations}")

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)
