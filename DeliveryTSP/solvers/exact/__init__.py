from DeliveryTSP.solvers.exact.held_karp import HeldKarpSolver, reconstruct_order

__all__ = ["HeldKarpSolver", "reconstruct_order"]
