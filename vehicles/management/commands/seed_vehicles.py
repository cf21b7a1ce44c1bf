# vehicles/management/commands/seed_vehicles.py
import json

from django.core.management.base import BaseCommand

from vehicles.seeding import build_vehicle_payloads


class Command(BaseCommand):
    help = (
        "Gera payloads de veículos fake (JSON) prontos para POST em /api/internal/vehicle. "
        "Para popular o processo do servidor, use VEHICLE_SEED_COUNT."
    )

    def add_arguments(self, parser):
        parser.add_argument("--min", "--n", dest="n", type=int, default=100,
                            help="Quantidade de veículos a gerar (alias: --min, --n)")
        parser.add_argument("--seed", type=int, default=None, help="Semente para resultados reproduzíveis")
        parser.add_argument("--indent", type=int, default=None, help="Indentação do JSON de saída")

    def handle(self, *args, **options):
        payloads = build_vehicle_payloads(options["n"], seed=options["seed"])
        self.stdout.write(json.dumps(payloads, ensure_ascii=False, indent=options["indent"]))
        self.stderr.write(self.style.SUCCESS(f"Veículos gerados: {len(payloads)}"))
