# -*- coding: utf-8 -*-
"""Static movie catalog shown on the Home tab."""

from __future__ import annotations

from movieapp.models.movie import Movie


_CATALOG: tuple[Movie, ...] = (
    Movie(
        id="tt0499549",
        title="Avatar",
        year="2009",
        genre="Action, Adventure, Fantasy",
        director="James Cameron",
        actors="Sam Worthington, Zoe Saldana, Sigourney Weaver, Stephen Lang",
        plot=(
            "A paraplegic marine dispatched to the moon Pandora on a unique mission "
            "becomes torn between following his orders and protecting an alien civilization."
        ),
        rating=7.9,
    ),
    Movie(
        id="tt0416449",
        title="300",
        year="2006",
        genre="Action, Drama, Fantasy",
        director="Zack Snyder",
        actors="Gerard Butler, Lena Headey, Dominic West, David Wenham",
        plot=(
            "King Leonidas of Sparta and a force of 300 men fight the Persians "
            "at Thermopylae in 480 B.C."
        ),
        rating=7.7,
    ),
    Movie(
        id="tt0848228",
        title="The Avengers",
        year="2012",
        genre="Action, Sci-Fi, Thriller",
        director="Joss Whedon",
        actors="Robert Downey Jr., Chris Evans, Mark Ruffalo, Chris Hemsworth",
        plot=(
            "Earth's mightiest heroes must come together and learn to fight as a team "
            "if they are to stop the mischievous Loki and his alien army from enslaving humanity."
        ),
        rating=8.1,
    ),
    Movie(
        id="tt0993846",
        title="The Wolf of Wall Street",
        year="2013",
        genre="Biography, Comedy, Crime",
        director="Martin Scorsese",
        actors="Leonardo DiCaprio, Jonah Hill, Margot Robbie, Matthew McConaughey",
        plot=(
            "Based on the true story of Jordan Belfort, from his rise to a wealthy "
            "stock-broker living the high life to his fall involving crime, corruption "
            "and the federal government."
        ),
        rating=8.2,
    ),
    Movie(
        id="tt0816692",
        title="Interstellar",
        year="2014",
        genre="Adventure, Drama, Sci-Fi",
        director="Christopher Nolan",
        actors="Ellen Burstyn, Matthew McConaughey, Mackenzie Foy, John Lithgow",
        plot=(
            "A team of explorers travel through a wormhole in space in an attempt "
            "to ensure humanity's survival."
        ),
        rating=8.6,
    ),
    Movie(
        id="tt0944947",
        title="Game of Thrones",
        year="2011 - 2018",
        genre="Adventure, Drama, Fantasy",
        director="N/A",
        actors="Peter Dinklage, Lena Headey, Emilia Clarke, Kit Harington",
        plot=(
            "While a civil war brews between several noble families in Westeros, "
            "the children of the former rulers of the land attempt to rise up to power."
        ),
        rating=9.5,
    ),
    Movie(
        id="tt2306299",
        title="Vikings",
        year="2013 - 2020",
        genre="Action, Drama, History",
        director="N/A",
        actors="Travis Fimmel, Clive Standen, Gustaf Skarsgard, Katheryn Winnick",
        plot=(
            "Vikings follows the adventures of Ragnar Lothbrok, the greatest hero of his age."
        ),
        rating=9.5,
    ),
    Movie(
        id="tt1520211",
        title="The Walking Dead",
        year="2010 - 2022",
        genre="Drama, Horror, Thriller",
        director="N/A",
        actors="Andrew Lincoln, Jon Bernthal, Sarah Wayne Callies, Laurie Holden",
        plot=(
            "Sheriff's Deputy Rick Grimes awakens from a coma to find a post-apocalyptic "
            "world dominated by flesh-eating zombies."
        ),
        rating=8.7,
    ),
    Movie(
        id="tt2707408",
        title="Narcos",
        year="2015 - 2017",
        genre="Biography, Crime, Drama",
        director="N/A",
        actors="Wagner Moura, Boyd Holbrook, Pedro Pascal, Joanna Christie",
        plot=(
            "A chronicled look at the criminal exploits of Colombian drug lord Pablo Escobar."
        ),
        rating=8.9,
    ),
    Movie(
        id="tt0903747",
        title="Breaking Bad",
        year="2008 - 2013",
        genre="Crime, Drama, Thriller",
        director="N/A",
        actors="Bryan Cranston, Anna Gunn, Aaron Paul, Dean Norris",
        plot=(
            "A high school chemistry teacher diagnosed with cancer turns to manufacturing "
            "and selling methamphetamine to secure his family's financial future."
        ),
        rating=9.5,
    ),
)


def get_movies() -> list[Movie]:
    """Return the catalog in display order."""
    return list(_CATALOG)
