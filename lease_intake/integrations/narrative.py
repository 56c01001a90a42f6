"""Lease summary generation with Google Gemini (google-genai)."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
from google import genai
from google.genai import errors, types

from lease_intake.config import NarrativeConfig
from lease_intake.exceptions import NarrativeGenerationError
from lease_intake.models.lease.contract import LeaseContract
from lease_intake.rules.insurance import quote_for
from lease_intake.sinks.serialization import contract_to_dict, quote_to_dict

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = """
Você é um assistente imobiliário. Você recebe um JSON com os dados de uma
locação e redige, em português do Brasil, o "RESUMO LOCAÇÃO" usado pelo
departamento jurídico para elaborar o contrato.

Formatação:
- Datas no formato DD/MM/AAAA.
- Valores monetários no formato R$ 1.234,56.
- Títulos e rótulos em negrito com asteriscos duplos (**Título**).
- Campo vazio ou nulo: escreva "Não informado".

Estrutura, nesta ordem:

**RESUMO LOCAÇÃO**

**DADOS DO IMÓVEL**: endereço de 'property_address' (Rua, Número - Complemento - Bairro, Cidade/UF - CEP).

**ADMINISTRAÇÃO & PARCERIAS**: declaração no IR (Sim/Não); taxa de administração
('admin_fee' em %, ou "Sem Administração" se 'no_admin'); corretor e captador;
parcerias interna e externa com os nomes quando houver.

**DADOS DA GARANTIA**: tipo ('guarantee_type') e detalhes do objeto 'guarantee'
(valor da caução, seguradora e apólice, ou valor do título). Para "Fiador",
remeta à seção de fiadores; para "Sem Garantia", escreva "Nenhuma garantia informada".

**SEGURO INCÊNDIO**: tipo de imóvel e cobertura selecionados; se houver cotação,
liste incêndio, perda de aluguel, responsabilidade civil, vendaval/impacto,
prêmio mensal e prêmio anual exatamente como informados. Sem cotação,
escreva "Cotação não disponível".

**DADOS FINANCEIROS**: aluguel, condomínio, IPTU e a situação de cada despesa
(água, luz, gás, IPTU, condomínio, limpeza, outros com a descrição).

**DATAS E OBSERVAÇÕES**: início do contrato, dia de vencimento, índice de reajuste, observações.

**LOCADOR(ES)**, **LOCATÁRIO(S)** e **FIADOR(ES)** (este último só se houver):
para cada parte, nome ou razão social, CPF/CNPJ, RG/IE, profissão ou ramo,
estado civil, endereço, e-mail e telefone. Para pessoa jurídica, liste todos os
representantes. Inclua o cônjuge quando presente. Para locadores, inclua os
dados bancários e o favorecido ("O Próprio" se 'beneficiary_is_self').
Para fiadores, inclua o imóvel dado em garantia (endereço, matrícula, IPTU).

**DOCUMENTAÇÃO ANEXADA**: uma pasta para o imóvel ('property_files') e uma
por parte ('uploaded_files'), com subpasta para 'secondary_files' (cônjuge ou
sócios). Pasta vazia: "(Vazio)".
""".strip()


def build_prompt(contract: LeaseContract) -> str:
    """User prompt carrying the serialized contract and its insurance quote."""
    contract_json = json.dumps(contract_to_dict(contract), indent=2, ensure_ascii=False)
    quote_json = json.dumps(quote_to_dict(quote_for(contract)), indent=2, ensure_ascii=False)
    return (
        'Gere o "RESUMO LOCAÇÃO" com base nestes dados.\n\n'
        f"Dados do contrato:\n{contract_json}\n\n"
        f"Cotação do seguro incêndio:\n{quote_json}\n\n"
        "Liste explicitamente todos os locadores, locatários e fiadores."
    )


class NarrativeGenerator:
    """Turn a contract into the formatted summary text.

    Parameters
    ----------
    config : NarrativeConfig | None
        Model settings; the API key is required unless ``client`` is given.
    client : Any
        A ``google.genai.Client`` (or compatible) instance to use.
    """

    def __init__(self, config: NarrativeConfig | None = None, client: Any = None) -> None:
        self.config = config or NarrativeConfig()
        self.client = client or genai.Client(api_key=self.config.require_api_key())

    def generate(self, contract: LeaseContract) -> str | None:
        """Generate the summary for ``contract``.

        Returns
        -------
        str | None
            The summary, or ``None`` when the model produced no text.

        Raises
        ------
        NarrativeGenerationError
            When the API call fails.
        """
        prompt = build_prompt(contract)
        logger.info(
            "Generating lease summary with %s (%d landlords, %d tenants)",
            self.config.model,
            len(contract.landlords),
            len(contract.tenants),
            extra={"model": self.config.model},
        )
        try:
            response = self.client.models.generate_content(
                model=self.config.model,
                contents=prompt,
                config=types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    temperature=self.config.temperature,
                    max_output_tokens=self.config.max_output_tokens,
                ),
            )
        except (errors.APIError, httpx.HTTPError) as e:
            logger.error("Summary generation failed: %s: %s", type(e).__name__, e)
            raise NarrativeGenerationError(f"Summary generation failed: {e}") from e

        text = (getattr(response, "text", "") or "").strip()
        if not text:
            logger.warning("Model returned an empty summary")
            return None
        return text
