"""The game world, the main command loop and the endings."""

import sys
from dataclasses import dataclass, field

from .actiune import Actiune, GameState
from .console import Console
from .entitate import EmptyNameError, Inamic, Jucator
from .locatie import Locatie
from .obiect import Arma, Potiune

_PLAIN = "Campia Inceputurilor"
_FOREST = "Padurea Strigoilor"
_CAVE = "Pestera Ursului"
_VILLAGE = "Satul Linistit"
_CAMP = "Tabara Banditilor"
_RIVER = "Raul Inundat"
_CASTLE = "Castelul Impunator"
_THRONE = "Tronul Regal"

_COMMAND_LIMIT = 40
_INVALID_LIMIT = 5


@dataclass
class _Session:
    """Everything one play-through changes."""

    state: GameState
    enemies: dict = field(default_factory=dict)
    listened_to_king: bool = False
    debating: bool = False
    happy_ending: bool = False


def _build_world():
    """Create the places, link their exits and return the starting place."""
    plain = Locatie(_PLAIN, "In jurul tau vezi o campie intinsa, iar in departare in nord se zareste o padure intunecata.  In sud poti vedea un fum care se ridica deasupra unui deal, iar in est se afla un sat micut.")
    forest = Locatie(_FOREST, "Te invarti intr-o padure intunecata, unde copacii sunt atat de inalti incat nu poti vedea cerul. In jurul tau, poti auzi sunete ciudate si vezi umbre miscandu-se printre copaci. In est, poti vedea o pestera, iar in sud se afla campia unde ai inceput aventura ta. Din vest, auzi un paraias care curge.")
    cave = Locatie(_CAVE, "In fata ta se afla o pestera intunecata. In interior, poti auzi un zgomot infricosator si vezi niste oase pe jos.")
    village = Locatie(_VILLAGE, "Te afli intr-un sat micut, unde oamenii par prietenosi. La iesirea din est a satului vezi o carare care duce catre un castel impunator.")
    camp = Locatie(_CAMP, "Te afli intr-o tabara a banditilor, unde poti vedea corturi si focuri de tabara. In jurul tau, banditii se pregatesc de lupta. In nord, poti vedea o campie intinsa.")
    river = Locatie(_RIVER, "Te afli langa un rau care curge rapid. Apa este rece si tulbure, iar in jurul tau poti vedea pietre si copaci cazuti. In est, poti vedea o padure intunecata.")
    castle = Locatie(_CASTLE, "Te afli inauntrul unui castel impunator, cu ziduri groase si turnuri inalte. In jurul tau, poti vedea arme si armuri vechi, iar in fata ta se afla o usa mare care duce catre o sala de tron.")
    throne = Locatie(_THRONE, "Te afli in sala de tron a castelului, unde poti vedea un tron mare si impunator. In fata ta vezi regele care te asteapta sa te ingenunchiezi.")
    links = [
        (plain, "nord", forest), (plain, "sud", camp), (plain, "est", village),
        (forest, "sud", plain), (forest, "est", cave), (forest, "vest", river),
        (cave, "vest", forest), (river, "est", forest), (camp, "nord", plain),
        (village, "vest", plain), (village, "est", castle),
        (castle, "vest", village), (castle, "usa", throne), (throne, "usa", castle),
    ]
    for origin, direction, destination in links:
        origin.add_exit(direction, destination)
    return plain


class Joc:
    """Runs one game from the player's name to one of the endings."""

    def __init__(self, console=None, rng=None):
        self.console = console if console is not None else Console()
        self.rng = rng
        self.actions = Actiune(self.console)

    def _say(self, text):
        self.console.write(f"{text}\n")

    def ending(self, king, strigoi, bear, bandit_king, happy_ending):
        """Write the closing story according to who has been defeated."""
        if king.health == 0:
            if happy_ending:
                self._say("Ai reusit sa il invingi pe rege si ai oprit tirania sa! Regatul este salvat!")
                self._say("Felicitari! Ai terminat jocul cu final fericit!")
            else:
                self._say("Nu ai respectat dorintele regelui si ai decis sa te lupti cu el. Ai reusit sa il invingi si in absenta lui haosul din regat dispare.")
                self._say("Totul e bine cand se termina cu bine!")
            self._say("Multumesc ca ai jucat jocul!")
        elif king.health > 0:
            self._say("Ai murit!")
            self._say("Sfarsitul jocului!")
            self._say("Multumesc ca ai jucat jocul!")
        if bandit_king.health == 0:
            self._say("Ai terminat turneul si ai devenit Ucigasul de Banditi!")
        if strigoi.health == 0:
            self._say("Ai invins strigoiul si ai adus liniste in padure!")
        if bear.health == 0:
            self._say("Ai invins ursul si ai adus liniste in pestera!")
        if happy_ending and strigoi.health == 0 and bear.health == 0 and bandit_king.health == 0:
            self._say("Ai reusit sa invingi toti inamicii!")
            self._say(f"Ai doborat {Inamic.count()} inamici!")

    def start(self):
        """Play the game until it ends, reporting a blank name on stderr."""
        self._say("Bine ai venit! Cum te numesti?")
        try:
            self._play()
        except (EmptyNameError, TypeError) as error:
            sys.stderr.write(f"Eroare la crearea jucatorului {error}\n")

    def _play(self):
        player = Jucator(console=self.console, rng=self.rng)
        player.read_name()
        self._say(str(player))
        self._say("Te-ai trezit intr-o lume necunoscuta, in care trebuie sa supravietuiesti si sa te lupti cu inamici. Incepe aventura ta!")
        start_location = _build_world()
        enemies = {
            key: Inamic(name, health, strength, self.console)
            for key, name, health, strength in [
                ("strigoi", "Strigoi", 90, 8),
                ("bear", "Urs", 100, 15),
                ("bandit1", "Bandit", 110, 18),
                ("bandit2", "Capitanul Bandit", 115, 23),
                ("bandit3", "Regele Bandit", 120, 25),
                ("demon", "Demon", 150, 35),
                ("king", "Rege", 170, 37),
            ]
        }
        session = _Session(GameState(player, start_location), enemies)

        start_location.mark_visited()
        self.actions.show_location(start_location)
        self._say("Gasesti pe jos o sabie de lemn si o potiune de viata.")
        player.inventory.add(Arma("Sabie de lemn", 1, 1))
        player.inventory.add(Potiune("Potiune de viata", 1, 30))
        self._say("Daca vrei sa echipezi sabia, scrie 'echipare'.")
        self._say("Daca vrei sa folosesti potiunea, scrie 'foloseste'.")
        self._say("Daca vrei sa vezi inventarul, scrie 'inventar'.")

        commands = 0
        invalid = 0
        while True:
            commands += 1
            self._prompts(session)
            self.console.write("Actiunea ta este ")
            try:
                command = self.console.read_word()
            except EOFError:
                self._say("Eroare la citirea comenzii sau sfarsit de input. Jocul se opreste automat.")
                break
            handled = self._dispatch(session, command)
            finished = False
            if commands > _COMMAND_LIMIT:
                self._say("Ai murit de extenuare de la atatea actiuni")
                player.health = 0
            if player.health == 0:
                self.ending(enemies["king"], enemies["strigoi"], enemies["bear"],
                            enemies["bandit3"], session.happy_ending)
                finished = True
            if not handled:
                self._say("Comanda invalida!")
                invalid += 1
                if invalid > _INVALID_LIMIT:
                    self._say("Ai introdus prea multe comenzi invalide. Jocul se opreste.")
                    finished = True
            if finished:
                break

    def _prompts(self, s):
        """Write what the current place offers before the player acts."""
        location = s.state.location
        enemies = s.enemies
        if location.name == _CASTLE and s.debating and enemies["demon"].health > 0:
            self._say("'Nu trebuia sa te intorci aici! Nu ai respectat dorintele regelui! Acum vei muri!' striga un demon.")
            self._say("Demonul te ataca!")
            self._say("Daca vrei sa te lupti cu el, scrie 'batalie'.")
            self._say("Daca vrei sa fugi, scrie 'mers'.")
        if location.name == _PLAIN and s.listened_to_king:
            self._say("Te afli in Campia Inceputurilor, locul unde a inceput totul. Aici trebuie sa te sacrifici pentru a salva regatul.")
            self._say("In ultimele tale clipe te uiti la propria reflectie in sabie si iti dai seama ca ai facut tot ce ai putut pentru a supravietui. Stai pe ganduri daca actiunile tale au fost justificate sau haosul cauzat trebuie reparat prin sacrificiul suprem.")
            self._say("'Cu ce a afectat venirea mea acest regat...? Nu exista alta solutie...?'")
            self._say("Daca vrei sa te sacrifici, scrie 'sacrificiu'.")
            self._say("Daca vrei sa continui lupta, intoarce-te la castel si afla adevarul.")
            s.debating = True
        if location.name == _THRONE and location.visited == 0:
            location.mark_visited()
            self._say("Te afli in fata regelui. Daca vrei sa te ingenunchezi, scrie 'ingenuncheaza'.")
            self._say("Daca vrei sa te lupti cu el, scrie 'batalie'.")
        if location.name == _FOREST and enemies["strigoi"].health > 0:
            self._say("Strigoiul te priveste cu ochi reci. 'Poti lupta cu mine, dar nu stii ce vei descoperi. Sau poate nu vei descoperi nimic...'")
            self._say("Daca vrei sa te lupti cu el, scrie 'batalie'.")
            self._say("Daca vrei sa fugi, scrie 'mers'.")
        if location.name == _CAVE and enemies["bear"].health > 0:
            self._say("Un urs te ataca!")
            self._say("Daca vrei sa te lupti cu el, scrie 'batalie'.")
            self._say("Daca vrei sa fugi, scrie 'mers'.")
        if location.name == _RIVER and location.visited == 0:
            self._say("Raul ofera oportunitatea de a te vindeca.")
            self._say("Iti pui in inventar o potiune de apa vindecatoare.")
            location.mark_visited()
            s.state.player.inventory.add(Potiune("Apa vindecatoare", 1, 100))
        if location.name == _CAMP and location.visited == 0:
            location.mark_visited()
            self._say("Banditii te observa si iti propun o provocare. Poti participa intr-un turneu si dupa fiecare stadiu primesti o recompensa.")
            self._say("Turneul consta in 3 etape, fiecare cu un bandit diferit. Daca reusesti sa ii invingi pe toti, vei fi cunoscut drept Ucigasul de Banditi")
            self._say("Daca vrei sa participi, scrie 'turneu'.")

    def _dispatch(self, s, command):
        """Carry out a command; return True if it was a valid one here."""
        state = s.state
        player = state.player
        enemies = s.enemies
        king, demon = enemies["king"], enemies["demon"]
        handled = False

        def here(name):
            return state.location.name == name

        if command == "turneu" and here(_CAMP) and state.location.visited == 1:
            handled = True
            self._say("Turneul a inceput!")
            self.actions.tournament(state, enemies["bandit1"], enemies["bandit2"], enemies["bandit3"])
        if command == "sacrificiu" and s.debating and here(_PLAIN):
            handled = True
            self._say("Stai pe ganduri daca ai facut ceva sa meriti aceasta soarta, dar nu poti trai cu gandul ca ai cauzat atata distrugere.")
            self._say("Te sacrifici pentru a salva regatul. In ultimele tale clipe, te gandesti la tot ce ai realizat si la tot ce ai invatat. Te simti impacat cu tine insuti si cu alegerile tale.")
            self._say("Cine stie ce s-a intamplat cu regatul...")
            player.health = 0
        if here(_THRONE) and state.location.visited == 1 and command == "ingenuncheaza":
            handled = True
            self._say("Regele te priveste cu niste ochi rosii plini de dispret. Acesta iti povesteste cum aparatia ta in regatul sau a lasat in urma numai moarte si distrugere")
            self._say("Acesta spune: 'Daca vrei sa iti speli pacatele du-te in locul de unde a inceput totul si sacrifica-te pentru a salva regatul de demonii care il bantuie.'")
            s.listened_to_king = True
        if here(_THRONE) and not s.debating and command == "batalie":
            self._say("Regele este surprins de atitudinea ta si te provoaca la lupta. Acesta isi ia sabia de pe peretele din spatele tronului si o indreapta spre tine.")
            handled = True
            self.actions.battle(player, king)
            if king.health == 0:
                player.health = 0
        if command == "batalie" and here(_CASTLE) and demon.health > 0 and s.debating:
            handled = True
            self.actions.battle(player, demon)
            if demon.health == 0:
                self._say("Ai reusit sa il invingi pe demon si poti sa continui in cautarea adevarului!")
                self._say("Te simti mai rezistent.")
                state.max_health = 175
                player.health = 175
                self._say("Gasesti pe jos o gheara de demon.")
                player.inventory.add(Arma("Gheara de demon", 1, 40))
        if command == "batalie" and here(_THRONE) and king.health > 0 and s.debating:
            handled = True
            self._say("'Esti un tradator si te voi executa cu mana mea'.")
            self.actions.battle(player, king)
            if king.health == 0:
                s.happy_ending = True
                player.health = 0
        if command in ("mers", "mers usa") and here(_CASTLE) and s.debating and demon.health > 0:
            handled = True
            self._say("'Nu te pot lasa sa fugi'. Demonul isi infige ghearele in tine si iti musca gatul.")
            self._say("Lasitatea ta a condamnat regatul la moarte.")
            player.health = 0
        if command == "batalie" and here(_FOREST) and enemies["strigoi"].health > 0:
            handled = True
            self.actions.fight_strigoi(state, enemies["strigoi"])
        if command == "batalie" and here(_CAVE) and enemies["bear"].health > 0:
            handled = True
            self.actions.fight_bear(state, enemies["bear"])

        simple = {
            "ajutor": lambda: self._say("Comenzile disponibile sunt: mers, batalie, echipare, dezechipare, foloseste, inventar, informatii, oprire"),
            "informatii": lambda: self._say(str(player)),
            "oprire": lambda: setattr(player, "health", 0),
            "mers": lambda: self.actions.walk(state),
            "echipare": lambda: self.actions.equip(state),
            "dezechipare": lambda: self.actions.unequip(state),
            "foloseste": lambda: self.actions.use_potion(state),
            "inventar": lambda: self.actions.inventory(player),
        }
        action = simple.get(command)
        if action is not None:
            handled = True
            action()
        return handled


def main(argv=None):
    """Run the game on standard input and output."""
    Joc().start()
    return 0