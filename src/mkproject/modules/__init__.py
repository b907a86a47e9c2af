"""📦 modules/ — Bounded contexts de mkproject

📚 Cada módulo contiene sus propias capas Clean Architecture:
   • domain/         → Value objects, excepciones y puertos
   • application/    → Casos de uso
   • infrastructure/ → Adaptadores concretos (subprocess, OS, logging)
   • entry_points/   → CLI (Composition Root)
"""
