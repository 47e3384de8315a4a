"""
Domain services - бизнес-логика сайта.
Сборка каталога из статических услуг и изменений админки, прием заявок,
конфигурация блоков страниц.
"""
