from DeliveryTSP.solvers.pathfinding.astar import AStarSolver, astar_path

__all__ = ["AStarSolver", "astar_path"]
