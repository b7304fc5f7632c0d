"""Known organizational hierarchy used to initialize an empty store."""

from __future__ import annotations

from cmadash.models.hierarchy import HierarchyEntry, Rank

_CE_VISAYAS = "CE VISAYAS 1 DIRECT"
_EZ_MATUNOG = "CEBU-EZ MATUNOG AGENCY"
_MATUNOG = "CEBU-MATUNOG AGENCY"


def _entry(name: str, rank: Rank, agency: str, unit_manager: str | None = None) -> HierarchyEntry:
    return HierarchyEntry(
        name=name, display_name=name, rank=rank,
        unit_manager=unit_manager, agency_name=agency,
    )


# Cebu-Matunog advisors may report to SUMs and UMs filed under Cebu-EZ Matunog.
HARDCODED_HIERARCHY: list[HierarchyEntry] = [
    # CE Visayas 1 Direct
    _entry("MARIBEL B. AGUA", Rank.SUM, _CE_VISAYAS),
    _entry("ANALYN D. GONZALES", Rank.UM, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("JAYNE B. FELICILDA", Rank.ADV, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("JESSICA D. ARIAS", Rank.ADV, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("RICHARD O. ROMBLON", Rank.ADV, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("ALEJANDRA L. BANDOY", Rank.ADV, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("RIZA T. HUMANGIT", Rank.ADV, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("JANELLE S. SARVIDA", Rank.ADV, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("REGINE C. SUHAY", Rank.ADV, _CE_VISAYAS, "MARIBEL B. AGUA"),
    _entry("ANNIE ROSE P. ABANILLA", Rank.ADV, _CE_VISAYAS, "ANALYN D. GONZALES"),
    _entry("MARY SUSSANE D. PALMA", Rank.ADV, _CE_VISAYAS, "ANALYN D. GONZALES"),
    _entry("MARICAR R. BASINANG", Rank.ADV, _CE_VISAYAS, "ANALYN D. GONZALES"),
    _entry("AVA MAY S. ESTONIO", Rank.ADV, _CE_VISAYAS, "ANALYN D. GONZALES"),
    _entry("GENELITA D. MAGBANUA", Rank.ADV, _CE_VISAYAS, "ANALYN D. GONZALES"),
    _entry("RUSH DANIEL C. ABELLA", Rank.ADV, _CE_VISAYAS, "ANALYN D. GONZALES"),
    _entry("JOANN N. SALVATIERRA", Rank.ADV, _CE_VISAYAS, "ANALYN D. GONZALES"),
    # Cebu-EZ Matunog
    _entry("HERMELYN V. SIMENE", Rank.SUM, _EZ_MATUNOG),
    _entry("MA EMELYN D. TAN", Rank.SUM, _EZ_MATUNOG),
    _entry("MARIA ESTRELLA C. MATUNOG", Rank.ADD, _EZ_MATUNOG),
    _entry("MARY KATE M. ACADEMIA", Rank.UM, _EZ_MATUNOG),
    _entry("ARCHIE S. BIGNO", Rank.UM, _EZ_MATUNOG),
    _entry("VIRGINIA B. IWAY", Rank.UM, _EZ_MATUNOG),
    _entry("EVELYN C. MONDERO", Rank.UM, _EZ_MATUNOG),
    _entry("DARLYN L. PEREZ", Rank.UM, _EZ_MATUNOG),
    # Cebu-Matunog
    _entry("NILO B. MATUNOG", Rank.ADD, _MATUNOG),
    _entry("JUDEZA F. BALISCO", Rank.UM, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("RANET L. CANU OG", Rank.UM, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("NATHALIE ROSE E. COLIMBO", Rank.UM, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("JEHZA F. ERAZO", Rank.UM, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("JANICE I. NUNEZ", Rank.UM, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("JAY B. ALOTA", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("ROSEMARIE A. ANDUYAN", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("MARIA SHEILA A. ANUADA", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("SUZANNE RAFAELA G. BILLONES", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("KEZIAH V. DELA CERNA", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("VICENTE MANUEL D. FARRARONS", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("MAY V. RODIS", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("HELYN V. SARONA", Rank.ADV, _MATUNOG, "HERMELYN V. SIMENE"),
    _entry("MICHAEL M. BALISCO", Rank.ADV, _MATUNOG, "JUDEZA F. BALISCO"),
    _entry("INEE KRISTINE B. FRANCISCO", Rank.ADV, _MATUNOG, "JUDEZA F. BALISCO"),
    _entry("JULIET F. JOSEPH", Rank.ADV, _MATUNOG, "JUDEZA F. BALISCO"),
    _entry("ARNIEL F. RODRIGUEZ", Rank.ADV, _MATUNOG, "JUDEZA F. BALISCO"),
    _entry("EMMA P. ALQUISALAS", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("DIVINA A. AMPARO", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("ANA LOU C. CABALLERO", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("ARLENE P. CANETE", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("NIEL B. CANU-OG", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("RUTH U. PAGARAO", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("NIDA M. PILAPIL", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("JANICE S. PINILI", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("ALDEMIOLA C. VICTORIANO", Rank.ADV, _MATUNOG, "RANET L. CANU OG"),
    _entry("MAY THERESE SUNSHINE S. BELLEZA", Rank.ADV, _MATUNOG, "NATHALIE ROSE E. COLIMBO"),
    _entry("LOUIE T. COLIMBO", Rank.ADV, _MATUNOG, "NATHALIE ROSE E. COLIMBO"),
    _entry("SOPHIA DOMINIQUE ROSE E. COLIMBO", Rank.ADV, _MATUNOG, "NATHALIE ROSE E. COLIMBO"),
    _entry("REYNALDO M. ERAZO", Rank.ADV, _MATUNOG, "NATHALIE ROSE E. COLIMBO"),
    _entry("RINA KLAIRE D. FERROLINO", Rank.ADV, _MATUNOG, "NATHALIE ROSE E. COLIMBO"),
    _entry("GLENDA C. MARCUELO", Rank.ADV, _MATUNOG, "NATHALIE ROSE E. COLIMBO"),
    _entry("ELMAR Y. VILLAHERMOSA", Rank.ADV, _MATUNOG, "NATHALIE ROSE E. COLIMBO"),
    _entry("JO-ANN A. BATION", Rank.ADV, _MATUNOG, "JEHZA F. ERAZO"),
    _entry("MICHELLE Y. PERALTA", Rank.ADV, _MATUNOG, "JEHZA F. ERAZO"),
    _entry("DIOSCORA A. TANGPUS", Rank.ADV, _MATUNOG, "JEHZA F. ERAZO"),
    _entry("MIRA FE P. TANGUB", Rank.ADV, _MATUNOG, "JEHZA F. ERAZO"),
    _entry("HILARIO J. BLANCO", Rank.ADV, _MATUNOG, "JANICE I. NUNEZ"),
    _entry("MAYLINDA S. BLANCO", Rank.ADV, _MATUNOG, "JANICE I. NUNEZ"),
    _entry("JORY NEIL A. PACTORES", Rank.ADV, _MATUNOG, "JANICE I. NUNEZ"),
    _entry("MA ANGELICA M. AMBRAD", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("NINA G. BOLINGOT", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("GEOFFREY RALPH C. BUOT", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("FERL ANN P. FRANZA", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("ANGELINA B. MIER", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("MA THERESA B. MIER", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("JENIFER C. ORTEGA", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("KENNETH T. QUINANOLA", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("JENYLIN V. ROCES", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("BELGRADE E. RUSSEL", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("GESELLE B. SACLOT", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("MICO B. SACLOT", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("GENEVIC C. TABILIRAN", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("JASMIN P. UY", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("HONEY GRACE B. ZUNIEGA", Rank.ADV, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("JESSICA G. BACULAN", Rank.UM, _MATUNOG, "MA EMELYN D. TAN"),
    _entry("VANIZA C. BASCAO", Rank.ADV, _MATUNOG, "JESSICA G. BACULAN"),
    _entry("ALNIE JANE S. DAANOY", Rank.ADV, _MATUNOG, "JESSICA G. BACULAN"),
    _entry("GREGOR U. GACUS", Rank.ADV, _MATUNOG, "JESSICA G. BACULAN"),
    _entry("JASMIN L. ALCALEN", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("SHELSEA M. ALESNA", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("MELINA B. ANDOG", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("DIANA MAE H. BAROMAN", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("JOY MARIE C. BARTOLOME", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("JOHNPAUL E. BASA", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("MARY GRACE G. CABALLES", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("LORETA LYNN J. CARWANA", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("PAUL FRANCIS II M. CUIZON", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("CYD H. DELA CASA", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("DIANNE A. DENIEGA", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("AERON CURL A. EUGENIO", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("SHERRYLYN C. LABADAN", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("CHEVY P. MODESTO", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("MARY JEAN S. POL", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("AMORGANDA R. RAGO", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("TRYZHA A. RECTO", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("JADE B. SACDALAN", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("ALMA B. SALDO", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("CHRISTY MAE C. SANDAGA", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("ROWENA M. SIBI", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("ERENIO F. TULBO", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("AYE WIN", Rank.ADV, _MATUNOG, "MARIA ESTRELLA C. MATUNOG"),
    _entry("MARICAR J. ANOSA", Rank.ADV, _MATUNOG, "MARY KATE M. ACADEMIA"),
    _entry("FREECY T. ASOY", Rank.ADV, _MATUNOG, "MARY KATE M. ACADEMIA"),
    _entry("RALF JUDIEL E. BAYNOSA", Rank.ADV, _MATUNOG, "MARY KATE M. ACADEMIA"),
    _entry("MARIA ANGELIKA B. LIM", Rank.ADV, _MATUNOG, "MARY KATE M. ACADEMIA"),
    _entry("MAE C. LINDO", Rank.ADV, _MATUNOG, "MARY KATE M. ACADEMIA"),
    _entry("ZANDRA Z. MONTECILLO", Rank.ADV, _MATUNOG, "MARY KATE M. ACADEMIA"),
    _entry("MARIO ISRAEL RAUDA ALFARO", Rank.ADV, _MATUNOG, "MARY KATE M. ACADEMIA"),
    _entry("FLORGIE MAY P. BIGNO", Rank.ADV, _MATUNOG, "ARCHIE S. BIGNO"),
    _entry("CRISTONI JOHN G. SALINIO", Rank.ADV, _MATUNOG, "ARCHIE S. BIGNO"),
    _entry("EMILYN T. SURIGAO", Rank.ADV, _MATUNOG, "ARCHIE S. BIGNO"),
    _entry("ELTON T. BERMISO", Rank.ADV, _MATUNOG, "VIRGINIA B. IWAY"),
    _entry("ROSE MARIE G. BERMISO", Rank.ADV, _MATUNOG, "VIRGINIA B. IWAY"),
    _entry("GEMMA T. LATINAZO", Rank.ADV, _MATUNOG, "VIRGINIA B. IWAY"),
    _entry("DENNI DOMINIC M. LEPON", Rank.ADV, _MATUNOG, "VIRGINIA B. IWAY"),
    _entry("GERALYN JANE D. LEPON", Rank.ADV, _MATUNOG, "VIRGINIA B. IWAY"),
    _entry("MICHELLE R. LOMODAG", Rank.ADV, _MATUNOG, "VIRGINIA B. IWAY"),
    _entry("NELMAR L. SAYSON", Rank.ADV, _MATUNOG, "VIRGINIA B. IWAY"),
    _entry("MARIA CRISTINA M. MONDRAGON", Rank.ADV, _MATUNOG, "EVELYN C. MONDERO"),
    _entry("NINFA E. PEDRERA", Rank.ADV, _MATUNOG, "EVELYN C. MONDERO"),
    _entry("RITCHIEL B. SENO", Rank.ADV, _MATUNOG, "EVELYN C. MONDERO"),
    _entry("ARNEL T. TUNDAG", Rank.ADV, _MATUNOG, "EVELYN C. MONDERO"),
    # Cebu-EZ Matunog
    _entry("KRISTLYNNE JOYCE P. ARDIENTE", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("ESTHER LINDA L. BARCELO", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("CLARK JOHAN Z. CAROPE", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("EUNICE FAYE T. CUIZON", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("RAYMART M. DERAMA", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("ANNA CRISTINA O. ESTANDARTE", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("WILFREDO F. MONTERMOSO", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("REXELIETO JR M. NACUA", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("MARC JOHN R. PEREZ", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("LEONOVIE B. SUAN", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("ALJON C. TUYOR", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    _entry("ETHEL MARIE Q. VALMORIA", Rank.ADV, _EZ_MATUNOG, "DARLYN L. PEREZ"),
    # Cebu-Matunog
    _entry("NIDA L. ARINGAY", Rank.UM, _MATUNOG, "NILO B. MATUNOG"),
    _entry("JULITO G. GEOLAGON", Rank.UM, _MATUNOG, "NILO B. MATUNOG"),
    _entry("HAYDEE I. JALDON", Rank.UM, _MATUNOG, "NILO B. MATUNOG"),
    _entry("MARIA ROSARIO C. MATUNOG", Rank.UM, _MATUNOG, "NILO B. MATUNOG"),
    _entry("SARAH P. RECLA", Rank.UM, _MATUNOG, "NILO B. MATUNOG"),
    _entry("DAYLINDA A. ALBARRACIN", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("ANGELITO B. BARLAM", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("CARMEL ANGELI M. BETONIO", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("VIRGINIA M. GALAGARAN", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("NECIAS L. GALAPON", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("LIZA A. INOCIAN", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("FRITZIE M. LICAYAN", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("MARCOS CECILIO E. MACARIOLA", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("CHRISTINE FRANCES R. MORALES", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("REZALYN V. TAYPIN", Rank.ADV, _MATUNOG, "NILO B. MATUNOG"),
    _entry("EDGAR C. ARINGAY", Rank.ADV, _MATUNOG, "NIDA L. ARINGAY"),
    _entry("JOHN MICHAEL L. ARINGAY", Rank.ADV, _MATUNOG, "NIDA L. ARINGAY"),
    _entry("MICHAEL D. JARINA", Rank.ADV, _MATUNOG, "NIDA L. ARINGAY"),
    _entry("CHELSEE ROSEMAE S. MORALDE", Rank.ADV, _MATUNOG, "NIDA L. ARINGAY"),
    _entry("MARIAH MICHELLE M. ROCA", Rank.ADV, _MATUNOG, "NIDA L. ARINGAY"),
    _entry("ROS LYN T. AQUI", Rank.ADV, _MATUNOG, "JULITO G. GEOLAGON"),
    _entry("ANDREAN RULE L. BOMEDIANO", Rank.ADV, _MATUNOG, "JULITO G. GEOLAGON"),
    _entry("CARMEL THERESE P. BORROMEO", Rank.ADV, _MATUNOG, "JULITO G. GEOLAGON"),
    _entry("VERONICA E. TOLENTINO", Rank.ADV, _MATUNOG, "JULITO G. GEOLAGON"),
    _entry("CHRISTIE MARIE A. ALKUINO", Rank.ADV, _MATUNOG, "HAYDEE I. JALDON"),
    _entry("FRANCIS M. MATHEU", Rank.ADV, _MATUNOG, "HAYDEE I. JALDON"),
    _entry("MARITES B. TALAVER", Rank.ADV, _MATUNOG, "HAYDEE I. JALDON"),
    _entry("JULIE ANN L. TAN", Rank.ADV, _MATUNOG, "HAYDEE I. JALDON"),
    _entry("ALEXANDER S. TEO", Rank.ADV, _MATUNOG, "HAYDEE I. JALDON"),
    _entry("AINSLEY M. ALTERADO", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("HAYDEE D. ARROFO", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("MONALIZA P. AVENIDO", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("RAYMOND D. BOHOL", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("MARK C. BORJA", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("CHARLINE MAY T. BUNDA", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("MARKLEEN P. CANAS", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("JONNAH DALE C. MANINGO", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("SHIELA D. TABIGUE", Rank.ADV, _MATUNOG, "MARIA ROSARIO C. MATUNOG"),
    _entry("GWYNETH MARIE R. JAKOSALEM", Rank.ADV, _MATUNOG, "SARAH P. RECLA"),
    _entry("MARY ALTHEA R. JAKOSALEM", Rank.ADV, _MATUNOG, "SARAH P. RECLA"),
    _entry("JEFFREY JOHN S. LIMOTAN", Rank.ADV, _MATUNOG, "SARAH P. RECLA"),
    _entry("CORAZON F. OUANO", Rank.ADV, _MATUNOG, "SARAH P. RECLA"),
    _entry("MA PAMELA P. RECLA", Rank.ADV, _MATUNOG, "SARAH P. RECLA"),
]
