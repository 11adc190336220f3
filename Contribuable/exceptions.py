"""
Exceptions de l'ingestion des contribuables.
"""


class LotInvalideError(ValueError):
    """Le champ 'data' ne contient pas un tableau JSON exploitable."""


class FichierNonSauvegardeError(Exception):
    """Exception levée quand une pièce jointe ne peut pas être écrite sur disque."""

    def __init__(self, nom_fichier, cause=None):
        self.nom_fichier = nom_fichier
        self.cause = cause
        super().__init__(f"Erreur lors de la sauvegarde du fichier: {nom_fichier}")
