"""Tests para la sesion CLI de la maquina expendedora."""

from __future__ import annotations

import io
import json
import tempfile
import unittest
from pathlib import Path

from cliente.main import (
    EXIT_INVENTORY_ERROR,
    EXIT_OK,
    EXIT_TRANSACTION_FAILED,
    parse_args,
    run_session,
    split_vend_argument,
)


class RunSessionTests(unittest.TestCase):
    """Valida codigos de salida y salida impresa de una sesion."""

    def test_successful_session(self) -> None:
        """Depositos y ventas validas terminan con codigo 0."""
        with tempfile.TemporaryDirectory() as temp_dir:
            resource_dir = self._write_inventory(Path(temp_dir))
            out = io.StringIO()

            status_code = run_session(
                resource="Inventario",
                resource_type="json",
                resource_dir=resource_dir,
                initial_deposit=0,
                deposits=["2"],
                vends=["Chips:2"],
                out=out,
            )

        self.assertEqual(status_code, EXIT_OK)
        output = out.getvalue()
        self.assertIn("Deposito aceptado. Saldo: $2.00.", output)
        self.assertIn("Vendido: Papas Fritas x2 por $2.00. Saldo: $0.00.", output)
        self.assertIn("Papas Fritas: $1.00 (quedan 1)", output)
        self.assertIn("Saldo final: $0.00", output)

    def test_failed_vend_returns_one(self) -> None:
        """Una venta rechazada imprime el motivo y retorna codigo 1."""
        with tempfile.TemporaryDirectory() as temp_dir:
            resource_dir = self._write_inventory(Path(temp_dir))
            out = io.StringIO()

            status_code = run_session(
                resource="Inventario",
                resource_type="json",
                resource_dir=resource_dir,
                vends=["Gum", "Pizza:1"],
                out=out,
            )

        self.assertEqual(status_code, EXIT_TRANSACTION_FAILED)
        self.assertIn("Chicle esta agotado.", out.getvalue())
        self.assertIn("Seleccion no disponible: Pizza.", out.getvalue())
        self.assertIn("Saldo final: $10.00", out.getvalue())

    def test_missing_resource_returns_two(self) -> None:
        """Si el inventario no se puede cargar, la sesion no inicia."""
        with tempfile.TemporaryDirectory() as temp_dir:
            out = io.StringIO()
            with self.assertLogs("cliente.main", level="ERROR"):
                status_code = run_session(
                    resource="NoExiste",
                    resource_dir=Path(temp_dir),
                    out=out,
                )

        self.assertEqual(status_code, EXIT_INVENTORY_ERROR)
        self.assertEqual(out.getvalue(), "")

    def test_huge_integer_resource_returns_two(self) -> None:
        """Un valor numerico desbordado en el recurso impide iniciar la sesion."""
        with tempfile.TemporaryDirectory() as temp_dir:
            resource_dir = Path(temp_dir)
            (resource_dir / "Inventario.json").write_text(
                '{"Chips": {"price": ' + "9" * 400 + ', "quantity": 1}}',
                encoding="utf-8",
            )
            out = io.StringIO()
            with self.assertLogs("cliente.main", level="ERROR"):
                status_code = run_session(
                    resource="Inventario",
                    resource_type="json",
                    resource_dir=resource_dir,
                    out=out,
                )

        self.assertEqual(status_code, EXIT_INVENTORY_ERROR)

    def test_split_vend_argument(self) -> None:
        """La cantidad es opcional y por defecto 1."""
        self.assertEqual(split_vend_argument("Soda"), ("Soda", "1"))
        self.assertEqual(split_vend_argument("Soda:3"), ("Soda", "3"))

    def test_parse_args_collects_repeated_options(self) -> None:
        """--deposit y --vend pueden repetirse."""
        args = parse_args(["--deposit", "1", "--deposit", "2", "--vend", "Soda", "--type", "json"])

        self.assertEqual(args.deposits, ["1", "2"])
        self.assertEqual(args.vends, ["Soda"])
        self.assertEqual(args.resource_type, "json")
        self.assertEqual(args.initial_deposit, 10.0)

    @staticmethod
    def _write_inventory(base_path: Path) -> Path:
        data = {
            "Chips": {"price": 1.0, "quantity": 3},
            "Gum": {"price": 0.5, "quantity": 0},
        }
        (base_path / "Inventario.json").write_text(json.dumps(data), encoding="utf-8")
        return base_path


if __name__ == "__main__":
    unittest.main()
