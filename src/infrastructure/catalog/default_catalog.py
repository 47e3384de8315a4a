"""
Статический каталог услуг компании.
Изменения из админ-панели сюда не попадают, они накладываются поверх (см. catalog_resolver).
"""
from typing import List

from src.domain.entities.catalog import Catalog, Category, PricingRow, Service


def _rows(*items) -> List[PricingRow]:
    return [PricingRow(name=name, price=price, unit=unit) for name, price, unit in items]


CATEGORIES: List[Category] = [
    Category(
        id="warehouse",
        slug="warehouse",
        name="Склад",
        description="Персонал для складских операций",
    ),
    Category(
        id="production",
        slug="production",
        name="Производство",
        description="Персонал для производственных линий",
    ),
    Category(
        id="construction",
        slug="construction",
        name="Стройка",
        description="Строительный персонал",
    ),
    Category(
        id="cleaning",
        slug="cleaning",
        name="Уборка",
        description="Услуги по уборке территорий и помещений",
    ),
    Category(
        id="earthworks",
        slug="earthworks",
        name="Земляные работы",
        description="Специалисты по земляным работам",
    ),
]


SERVICES: List[Service] = [
    # Склад
    Service(
        id="warehouse-staff",
        slug="personnel-na-sklad",
        title="Персонал на склад",
        description="Профессиональный складской персонал для различных операций",
        category_id="warehouse",
        full_description="Предоставляем квалифицированный персонал для работы на складе. Наши сотрудники имеют опыт работы с различными типами грузов и складского оборудования.",
        seo_text="Аренда персонала для склада в Москве. Квалифицированные складские работники с опытом работы. Быстрое предоставление персонала для складских операций.",
        pricing_table=_rows(
            ("Грузчик", "от 1500", "руб/смена"),
            ("Комплектовщик", "от 1800", "руб/смена"),
            ("Кладовщик", "от 2000", "руб/смена"),
        ),
    ),
    Service(
        id="packers",
        slug="fasovshchiki",
        title="Фасовщики",
        description="Специалисты по фасовке товаров",
        category_id="warehouse",
        full_description="Опытные фасовщики для упаковки и фасовки различных товаров. Работаем с продуктами питания, строительными материалами, товарами народного потребления.",
        seo_text="Услуги фасовщиков в Москве. Профессиональная фасовка товаров любой сложности. Быстрое предоставление персонала.",
    ),
    Service(
        id="labelers",
        slug="markirovshchiki",
        title="Маркировщики",
        description="Специалисты по маркировке товаров",
        category_id="warehouse",
        full_description="Квалифицированные маркировщики для нанесения этикеток, штрих-кодов и другой маркировки на товары.",
        seo_text="Маркировщики товаров в Москве. Профессиональная маркировка с соблюдением всех стандартов.",
    ),
    Service(
        id="stickers",
        slug="stikerovshchiki",
        title="Стикеровщики",
        description="Специалисты по наклейке стикеров и этикеток",
        category_id="warehouse",
        full_description="Опытные стикеровщики для наклейки этикеток, стикеров и другой маркировки на упаковку и товары.",
        seo_text="Услуги стикеровщиков в Москве. Быстрая и качественная наклейка этикеток.",
    ),
    Service(
        id="packaging",
        slug="upakovshchiki",
        title="Упаковщики",
        description="Специалисты по упаковке товаров",
        category_id="warehouse",
        full_description="Профессиональные упаковщики для упаковки товаров различных категорий. Работаем с хрупкими, крупногабаритными и стандартными товарами.",
        seo_text="Услуги упаковщиков в Москве. Качественная упаковка товаров любой сложности.",
    ),
    Service(
        id="loaders",
        slug="gruzchiki",
        title="Грузчики",
        description="Грузчики для складских работ",
        category_id="warehouse",
        full_description="Физически подготовленные грузчики для погрузочно-разгрузочных работ на складе. Работаем с различными типами грузов.",
        seo_text="Грузчики на склад в Москве. Профессиональная погрузка и разгрузка товаров.",
        pricing_table=_rows(
            ("Грузчик (8 часов)", "от 1500", "руб/смена"),
            ("Грузчик (12 часов)", "от 2200", "руб/смена"),
        ),
    ),
    Service(
        id="pickers",
        slug="komplektovshchiki",
        title="Комплектовщики",
        description="Специалисты по комплектации заказов",
        category_id="warehouse",
        full_description="Опытные комплектовщики для сборки заказов по накладным. Работаем с системами WMS, сканерами и другим складским оборудованием.",
        seo_text="Комплектовщики заказов в Москве. Быстрая и точная комплектация товаров.",
    ),
    # Производство
    Service(
        id="production-staff",
        slug="personnel-na-proizvodstvo",
        title="Персонал на производство",
        description="Рабочий персонал для производства",
        category_id="production",
        full_description="Квалифицированный персонал для работы на производственных линиях. Опыт работы с различными типами оборудования и технологий.",
        seo_text="Персонал для производства в Москве. Квалифицированные рабочие для производственных линий.",
    ),
    Service(
        id="production-packaging",
        slug="upakovshchiki-proizvodstvo",
        title="Упаковщики",
        description="Упаковщики для производственных линий",
        category_id="production",
        full_description="Специалисты по упаковке готовой продукции на производственных линиях.",
        seo_text="Упаковщики на производство в Москве.",
    ),
    Service(
        id="production-labelers",
        slug="markirovshchiki-proizvodstvo",
        title="Маркировщики",
        description="Маркировщики для производственных линий",
        category_id="production",
        full_description="Специалисты по маркировке готовой продукции на производстве.",
        seo_text="Маркировщики на производство в Москве.",
    ),
    Service(
        id="production-pickers",
        slug="komplektovshchiki-proizvodstvo",
        title="Комплектовщики",
        description="Комплектовщики для производства",
        category_id="production",
        full_description="Опытные комплектовщики для сборки и комплектации продукции на производстве.",
        seo_text="Комплектовщики на производство в Москве.",
    ),
    Service(
        id="production-packers",
        slug="fasovshchiki-proizvodstvo",
        title="Фасовщики",
        description="Фасовщики для производственных линий",
        category_id="production",
        full_description="Специалисты по фасовке продукции на производственных линиях.",
        seo_text="Фасовщики на производство в Москве.",
    ),
    Service(
        id="production-loading",
        slug="rabochie-na-pogruzku",
        title="Рабочие на погрузку",
        description="Рабочие для погрузки готовой продукции",
        category_id="production",
        full_description="Физически подготовленные рабочие для погрузки готовой продукции на транспорт.",
        seo_text="Рабочие на погрузку продукции в Москве.",
    ),
    # Стройка
    Service(
        id="construction-staff",
        slug="personnel-na-stroyku",
        title="Персонал на стройку",
        description="Строительный персонал",
        category_id="construction",
        full_description="Квалифицированный строительный персонал для различных видов работ на объектах.",
        seo_text="Строительный персонал в Москве. Квалифицированные рабочие для строительных объектов.",
    ),
    Service(
        id="handymen",
        slug="raznorabochie",
        title="Разнорабочие",
        description="Разнорабочие для строительных объектов",
        category_id="construction",
        full_description="Опытные разнорабочие для выполнения различных строительных задач. Помощь специалистам, подготовка материалов, уборка территории.",
        seo_text="Разнорабочие на стройку в Москве. Универсальные рабочие для строительных объектов.",
        pricing_table=_rows(
            ("Разнорабочий (8 часов)", "от 2000", "руб/смена"),
            ("Разнорабочий (12 часов)", "от 2800", "руб/смена"),
        ),
    ),
    Service(
        id="monolith-workers",
        slug="monolitchiki",
        title="Монолитчики",
        description="Специалисты по монолитным работам",
        category_id="construction",
        full_description="Опытные монолитчики для заливки бетона, установки опалубки и других монолитных работ.",
        seo_text="Монолитчики в Москве. Профессиональные работы по монолитному строительству.",
    ),
    Service(
        id="installers",
        slug="montazhniki",
        title="Монтажники",
        description="Монтажники для строительных работ",
        category_id="construction",
        full_description="Квалифицированные монтажники для установки различных конструкций, оборудования и систем.",
        seo_text="Монтажники в Москве. Профессиональный монтаж конструкций и оборудования.",
    ),
    Service(
        id="finishers",
        slug="otdelochniki",
        title="Отделочники",
        description="Специалисты по отделочным работам",
        category_id="construction",
        full_description="Опытные отделочники для выполнения внутренних и наружных отделочных работ.",
        seo_text="Отделочники в Москве. Качественная отделка помещений и фасадов.",
    ),
    Service(
        id="construction-loaders",
        slug="gruzchiki-stroyka",
        title="Грузчики",
        description="Грузчики для строительных объектов",
        category_id="construction",
        full_description="Физически подготовленные грузчики для погрузочно-разгрузочных работ на строительных объектах.",
        seo_text="Грузчики на стройку в Москве.",
    ),
    Service(
        id="concrete-workers",
        slug="betonshchiki",
        title="Бетонщики",
        description="Специалисты по бетонным работам",
        category_id="construction",
        full_description="Опытные бетонщики для заливки бетона, укладки арматуры и других бетонных работ.",
        seo_text="Бетонщики в Москве. Профессиональные бетонные работы.",
    ),
    Service(
        id="reinforcement-workers",
        slug="armaturshchiki",
        title="Арматурщики",
        description="Специалисты по арматурным работам",
        category_id="construction",
        full_description="Квалифицированные арматурщики для вязки и установки арматуры.",
        seo_text="Арматурщики в Москве. Профессиональная работа с арматурой.",
    ),
    Service(
        id="drywall-workers",
        slug="gipsokartonshchiki",
        title="Гипсокартонщики",
        description="Специалисты по работе с гипсокартоном",
        category_id="construction",
        full_description="Опытные гипсокартонщики для монтажа перегородок, потолков и других конструкций из гипсокартона.",
        seo_text="Гипсокартонщики в Москве. Профессиональный монтаж гипсокартона.",
    ),
    Service(
        id="plasterers",
        slug="shtukatury",
        title="Штукатуры",
        description="Специалисты по штукатурным работам",
        category_id="construction",
        full_description="Квалифицированные штукатуры для оштукатуривания стен и потолков.",
        seo_text="Штукатуры в Москве. Качественная штукатурка поверхностей.",
    ),
    Service(
        id="putty-workers",
        slug="shpaklevshchiki",
        title="Шпаклёвщики",
        description="Специалисты по шпаклёвочным работам",
        category_id="construction",
        full_description="Опытные шпаклёвщики для выравнивания поверхностей перед финишной отделкой.",
        seo_text="Шпаклёвщики в Москве. Профессиональная шпаклёвка поверхностей.",
    ),
    # Уборка
    Service(
        id="territory-cleaning",
        slug="uborka-territoriy",
        title="Уборка территорий",
        description="Уборка прилегающих территорий",
        category_id="cleaning",
        full_description="Комплексная уборка прилегающих территорий, парковок, дворов и других открытых пространств.",
        seo_text="Уборка территорий в Москве. Профессиональная уборка прилегающих территорий.",
    ),
    Service(
        id="leaves-cleaning",
        slug="uborka-listvy",
        title="Уборка листвы",
        description="Сезонная уборка листвы",
        category_id="cleaning",
        full_description="Уборка опавшей листвы с территорий в осенний период. Используем специализированное оборудование.",
        seo_text="Уборка листвы в Москве. Сезонная уборка опавшей листвы.",
    ),
    Service(
        id="non-residential-cleaning",
        slug="uborka-nezhilyh-pomeshcheniy",
        title="Уборка нежилых помещений",
        description="Уборка офисов, складов, производственных помещений",
        category_id="cleaning",
        full_description="Профессиональная уборка нежилых помещений: офисов, складов, производственных цехов, торговых залов.",
        seo_text="Уборка нежилых помещений в Москве. Профессиональная клининговая служба.",
    ),
    Service(
        id="snow-cleaning",
        slug="uborka-snega",
        title="Уборка снега",
        description="Уборка снега с территорий",
        category_id="cleaning",
        full_description="Уборка снега с территорий, парковок, тротуаров.",
        seo_text="Уборка снега в Москве. Уборка снега с территорий.",
        pricing_table=_rows(
            ("Уборка снега (территория)", "от 500", "руб/м²"),
            ("Срочная уборка", "от 800", "руб/м²"),
        ),
    ),
    Service(
        id="snow-roof-cleaning",
        slug="uborka-snega-s-krysh",
        title="Уборка снега с крыш",
        description="Уборка снега с крыш зданий",
        category_id="cleaning",
        full_description="Уборка снега с крыш зданий с соблюдением всех мер безопасности.",
        seo_text="Уборка снега с крыш в Москве. Безопасная уборка снега с крыш зданий.",
        pricing_table=_rows(
            ("Уборка снега с крыш", "от 1500", "руб/м²"),
        ),
    ),
    Service(
        id="construction-waste-cleaning",
        slug="uborka-stroitelnogo-musora",
        title="Уборка строительного мусора",
        description="Вывоз и уборка строительного мусора",
        category_id="cleaning",
        full_description="Уборка и вывоз строительного мусора с объектов. Работаем с различными типами отходов строительства.",
        seo_text="Уборка строительного мусора в Москве. Вывоз и утилизация строительных отходов.",
    ),
    # Земляные работы
    Service(
        id="earthworks-staff",
        slug="personnel-dlya-zemlyanyh-rabot",
        title="Персонал для земляных работ",
        description="Специалисты по земляным работам",
        category_id="earthworks",
        full_description="Квалифицированный персонал для выполнения различных земляных работ.",
        seo_text="Персонал для земляных работ в Москве.",
    ),
    Service(
        id="excavators",
        slug="zemlekopy",
        title="Землекопы",
        description="Специалисты по копке и земляным работам",
        category_id="earthworks",
        full_description="Опытные землекопы для выполнения различных земляных работ: копка котлованов, траншей, планировка участков.",
        seo_text="Землекопы в Москве. Профессиональные земляные работы любой сложности.",
        pricing_table=_rows(
            ("Землекоп (8 часов)", "от 2500", "руб/смена"),
            ("Землекоп (12 часов)", "от 3500", "руб/смена"),
            ("Копка траншеи", "от 800", "руб/м³"),
        ),
    ),
    Service(
        id="foundation-excavation",
        slug="kopka-fundamenta",
        title="Копка фундамента",
        description="Копка котлованов под фундамент",
        category_id="earthworks",
        full_description="Профессиональная копка котлованов под фундамент с соблюдением всех требований и норм.",
        seo_text="Копка фундамента в Москве. Профессиональная копка котлованов под фундамент.",
    ),
    Service(
        id="trench-excavation",
        slug="kopka-transhey",
        title="Копка траншей",
        description="Копка траншей для коммуникаций",
        category_id="earthworks",
        full_description="Копка траншей для прокладки коммуникаций: водопровод, канализация, электрические кабели, газопровод.",
        seo_text="Копка траншей в Москве. Профессиональная копка траншей для коммуникаций.",
    ),
]


def get_default_catalog() -> Catalog:
    """Каталог сайта"""
    return Catalog(categories=list(CATEGORIES), services=list(SERVICES))
